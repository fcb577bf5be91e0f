"""
Authentication module for identity provider JWTs.

Tokens are validated with PyJWT:
- RS256 via the provider's JWKS when OIDC_JWKS_URL is configured
- HS256 via JWT_SECRET otherwise (development and tests)

Claims are mapped to an Identity by an ordered list of claim rules; the first
rule that yields a value for a field wins. The identity is then auto-provisioned
as an internal user and the internal user id is what endpoints receive.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Tuple

import jwt
from fastapi import HTTPException

from application.ports import UserRepository
from backend.settings import Settings

logger = logging.getLogger(__name__)


@lru_cache
def get_jwks_client(jwks_url: str) -> jwt.PyJWKClient:
    """Get or create the JWKS client for a provider URL."""
    return jwt.PyJWKClient(jwks_url)


# =============================================================================
# Claim mapping
# =============================================================================


@dataclass(frozen=True)
class Identity:
    """Who the token says the caller is."""

    external_id: str
    email: Optional[str] = None
    username: Optional[str] = None


Extractor = Callable[[Dict[str, Any], Dict[str, Optional[str]]], Optional[str]]


@dataclass(frozen=True)
class ClaimRule:
    """Fill `field` from the claims, if still unset."""

    field: str
    extract: Extractor
    name: str


def _claim(key: str) -> Extractor:
    def extract(claims: Dict[str, Any], resolved: Dict[str, Optional[str]]) -> Optional[str]:
        value = claims.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None
    return extract


def _first_of(key: str) -> Extractor:
    def extract(claims: Dict[str, Any], resolved: Dict[str, Optional[str]]) -> Optional[str]:
        values = claims.get(key)
        if isinstance(values, list):
            for value in values:
                if isinstance(value, str) and value.strip():
                    return value.strip()
        return None
    return extract


def _email_like(key: str) -> Extractor:
    inner = _claim(key)

    def extract(claims: Dict[str, Any], resolved: Dict[str, Optional[str]]) -> Optional[str]:
        value = inner(claims, resolved)
        if value and "@" in value:
            return value
        return None
    return extract


def _email_local_part(claims: Dict[str, Any], resolved: Dict[str, Optional[str]]) -> Optional[str]:
    email = resolved.get("email")
    if email:
        return email.split("@", 1)[0]
    return None


CLAIM_RULES: Tuple[ClaimRule, ...] = (
    ClaimRule("external_id", _claim("oid"), "oid"),
    ClaimRule("external_id", _claim("sub"), "sub"),
    ClaimRule("email", _claim("email"), "email"),
    ClaimRule("email", _first_of("emails"), "emails[0]"),
    ClaimRule("email", _email_like("preferred_username"), "preferred_username"),
    ClaimRule("username", _claim("name"), "name"),
    ClaimRule("username", _claim("given_name"), "given_name"),
    ClaimRule("username", _email_local_part, "email local part"),
)


def resolve_identity(
    claims: Dict[str, Any],
    rules: Tuple[ClaimRule, ...] = CLAIM_RULES,
) -> Identity:
    """
    Apply claim rules in order and build an Identity.

    Raises:
        HTTPException: 401 if no rule yields an external id
    """
    resolved: Dict[str, Optional[str]] = {"external_id": None, "email": None, "username": None}
    for rule in rules:
        if resolved.get(rule.field):
            continue
        value = rule.extract(claims, resolved)
        if value:
            logger.debug(f"Claim rule {rule.name} resolved {rule.field}")
            resolved[rule.field] = value

    if not resolved["external_id"]:
        raise HTTPException(status_code=401, detail="Token missing user ID")
    return Identity(
        external_id=resolved["external_id"],
        email=resolved["email"],
        username=resolved["username"],
    )


# =============================================================================
# Token validation
# =============================================================================


def verify_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    Validate a JWT and return its claims.

    Shared-secret (HS256) tokens are accepted only outside production;
    production requires OIDC_JWKS_URL.

    Raises:
        HTTPException: 401 if the token is expired or invalid
    """
    if not settings.oidc_jwks_url and settings.is_production:
        logger.error("OIDC_JWKS_URL is not set; refusing shared-secret tokens in production")
        raise HTTPException(status_code=401, detail="Token verification is not configured")

    options = {"verify_aud": bool(settings.oidc_audience)}
    kwargs: Dict[str, Any] = {"options": options}
    if settings.oidc_audience:
        kwargs["audience"] = settings.oidc_audience
    if settings.oidc_issuer:
        kwargs["issuer"] = settings.oidc_issuer

    try:
        if settings.oidc_jwks_url:
            signing_key = get_jwks_client(settings.oidc_jwks_url).get_signing_key_from_jwt(token)
            return jwt.decode(token, signing_key.key, algorithms=["RS256"], **kwargs)
        return jwt.decode(token, settings.jwt_secret, algorithms=["HS256"], **kwargs)
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")


# =============================================================================
# User provisioning
# =============================================================================


def provision_user(identity: Identity, user_repo: UserRepository) -> Dict[str, Any]:
    """
    Find or create the internal user for an identity.

    Lookup order: external id, then email (linking the external id to the
    existing record), then create.
    """
    user = user_repo.get_by_external_id(identity.external_id)
    if user:
        return user

    if identity.email:
        user = user_repo.get_by_email(identity.email)
        if user:
            logger.info(f"Linking external id to existing user {user['id']}")
            return user_repo.link_external_id(user["id"], identity.external_id) or user

    return user_repo.create(
        {
            "external_id": identity.external_id,
            "email": identity.email,
            "username": identity.username or identity.external_id,
        }
    )


def authenticate(
    authorization: Optional[str],
    settings: Settings,
    user_repo: UserRepository,
) -> str:
    """
    Validate the Authorization header and return the internal user id.

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authentication. Provide Authorization header.",
        )
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1]
    claims = verify_token(token, settings)
    identity = resolve_identity(claims)
    user = provision_user(identity, user_repo)
    return str(user["id"])
