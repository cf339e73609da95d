"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 3 users (admin, alice, bob)
- Income and expense groups
- A month of incomes and expenses for alice and bob
- A couple of blog posts
- Weekly reminders
"""

from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User, AccountType
from apps.blogs.models import Blog
from apps.expenses.models import Expense, ExpenseGroup
from apps.incomes.models import Income, IncomeGroup
from apps.reminders.models import Reminder, ReminderType, ReminderDay


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        income_groups, expense_groups = self.create_groups()
        self.create_records(users, income_groups, expense_groups)
        self.create_blogs(users)
        self.create_reminders(users)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (administrator)')
        self.stdout.write('  alice@example.com / password123')
        self.stdout.write('  bob@example.com / password123')

    def clear_data(self):
        """Clear all sample data from the database."""
        Reminder.objects.all().delete()
        Blog.objects.all().delete()
        Income.objects.all().delete()
        Expense.objects.all().delete()
        IncomeGroup.objects.all().delete()
        ExpenseGroup.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'username': 'admin',
                'account_type': AccountType.ADMINISTRATOR,
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        users = {'admin': admin}
        for name in ['alice', 'bob']:
            user, _ = User.objects.get_or_create(
                email=f'{name}@example.com',
                defaults={'username': name}
            )
            user.set_password('password123')
            user.save()
            users[name] = user

        return users

    def create_groups(self):
        self.stdout.write('  Creating groups...')

        income_groups = {}
        for name, description in [
            ('Salary', 'Monthly salary from employer'),
            ('Freelance', 'Side projects and consulting'),
        ]:
            group, _ = IncomeGroup.objects.get_or_create(
                name=name,
                defaults={'description': description}
            )
            income_groups[name] = group

        expense_groups = {}
        for name, description in [
            ('Rent', 'Monthly apartment rent'),
            ('Groceries', 'Food and household supplies'),
            ('Transport', 'Public transport and fuel'),
        ]:
            group, _ = ExpenseGroup.objects.get_or_create(
                name=name,
                defaults={'description': description}
            )
            expense_groups[name] = group

        return income_groups, expense_groups

    def create_records(self, users, income_groups, expense_groups):
        self.stdout.write('  Creating incomes and expenses...')

        now = timezone.now()
        for user in [users['alice'], users['bob']]:
            if user.incomes.exists() or user.expenses.exists():
                continue

            Income.objects.create(
                user=user,
                income_group=income_groups['Salary'],
                description='Monthly salary payment',
                amount=Decimal('3200.00'),
            )
            Income.objects.create(
                user=user,
                income_group=income_groups['Freelance'],
                description='Website redesign project',
                amount=Decimal('650.00'),
            )

            Expense.objects.create(
                user=user,
                expense_group=expense_groups['Rent'],
                description='Apartment rent for the month',
                amount=Decimal('1100.00'),
            )
            for week in range(4):
                expense = Expense.objects.create(
                    user=user,
                    expense_group=expense_groups['Groceries'],
                    description=f'Weekly groceries, week {week + 1}',
                    amount=Decimal('85.40') + week * Decimal('4.15'),
                )
                # Spread the shopping over the past month
                Expense.objects.filter(id=expense.id).update(
                    created_at=now - timedelta(weeks=3 - week)
                )
            Expense.objects.create(
                user=user,
                description='Birthday present for a friend',
                amount=Decimal('45.00'),
            )

    def create_blogs(self, users):
        self.stdout.write('  Creating blogs...')

        posts = [
            (users['alice'], 'Alice', 'How I track every expense',
             'Every evening I spend two minutes entering what I spent that day.'),
            (users['bob'], 'Bob', 'Building an emergency fund',
             'Put aside a fixed amount right after payday, before anything else.'),
        ]
        for user, author, description, text in posts:
            Blog.objects.get_or_create(
                user=user,
                description=description,
                defaults={'author': author, 'text': text}
            )

    def create_reminders(self, users):
        self.stdout.write('  Creating reminders...')

        Reminder.objects.get_or_create(
            user=users['alice'],
            type=ReminderType.EXPENSE,
            defaults={'reminder_day': ReminderDay.SUNDAY}
        )
        Reminder.objects.get_or_create(
            user=users['bob'],
            type=ReminderType.INCOME,
            defaults={'reminder_day': ReminderDay.FRIDAY}
        )
