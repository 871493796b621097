from jose import JWTError, jwt
from travel_admin.config import settings
from travel_admin.core.exceptions import UnauthorizedException


def decode_jwt(token: str) -> dict:
    """
    Decode and validate JWT token using shared SECRET_KEY.

    Args:
        token: JWT access token from Authorization header

    Returns:
        Decoded token payload with 'sub', 'exp', 'userType', 'businessId', etc.

    Raises:
        UnauthorizedException: If token invalid, expired, or malformed
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise UnauthorizedException(f"Invalid token: {str(e)}")

    # jose validates 'exp' when present but does not require it
    if payload.get("exp") is None:
        raise UnauthorizedException("Token missing expiration")

    if not payload.get("sub"):
        raise UnauthorizedException("Token missing user identifier")

    return payload
