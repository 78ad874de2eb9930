from recruitcms.utils.dates import isoformat


def normalize_user(user):
    return {
        "id": user.id,
        "tenant_id": user.tenant_id,
        "username": user.username,
        "email": user.email,
        "role": user.role,
        "is_active": user.is_active,
        "last_login": isoformat(user.last_login),
        "created_at": isoformat(user.created_at),
        "updated_at": isoformat(user.updated_at),
    }
