# hr_core/iam/auth.py
from __future__ import annotations

from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken
from rest_framework_simplejwt.settings import api_settings


def access_cookie_name() -> str:
    return settings.SIMPLE_JWT.get("AUTH_COOKIE", "hr_access")


class CookieOrHeaderJWTAuthentication(JWTAuthentication):
    """
    Bearer header first (API clients), then the HttpOnly access cookie set by
    auth/login/ (browser portals). The user is loaded together with its
    Account so role checks and ActorContext cost no extra query.
    """

    def authenticate(self, request):
        if self.get_header(request):
            return super().authenticate(request)

        raw_token = request.COOKIES.get(access_cookie_name())
        if not raw_token:
            return None

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token

    def get_user(self, validated_token):
        try:
            user_id = validated_token[api_settings.USER_ID_CLAIM]
        except KeyError:
            raise InvalidToken("Token contained no recognizable user identification")

        user = (
            self.user_model.objects.select_related("account")
            .filter(**{api_settings.USER_ID_FIELD: user_id})
            .first()
        )
        if user is None:
            raise AuthenticationFailed("User not found", code="user_not_found")
        if not user.is_active:
            raise AuthenticationFailed("User is inactive", code="user_inactive")
        return user
