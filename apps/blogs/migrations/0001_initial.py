# Generated manually for the expense tracker blogs app

import uuid
from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Blog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('description', models.CharField(max_length=255, validators=[django.core.validators.MinLengthValidator(8)])),
                ('text', models.TextField(validators=[django.core.validators.MinLengthValidator(8)])),
                ('author', models.CharField(help_text='Display name shown on the post', max_length=100, validators=[django.core.validators.MinLengthValidator(2)])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='blogs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'blogs',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['created_at'], name='blogs_created_7b53fa_idx'), models.Index(fields=['user'], name='blogs_user_id_5298ef_idx')],
            },
        ),
    ]
