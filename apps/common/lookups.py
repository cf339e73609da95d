from .exceptions import IdMismatchError

# Router lookup pattern for UUID primary keys; a malformed id never reaches
# the ORM and resolves to the JSON 404 handler instead.
UUID_LOOKUP_REGEX = r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'


def ensure_matching_id(validated_data, pk):
    """Reject a PUT whose body id names a different record than the URL."""
    body_id = validated_data.get('id')
    if body_id is not None and str(body_id) != str(pk).lower():
        raise IdMismatchError()
