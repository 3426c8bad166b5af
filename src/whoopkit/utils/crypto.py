import secrets


def generate_state_token() -> str:
    return secrets.token_urlsafe(32)
