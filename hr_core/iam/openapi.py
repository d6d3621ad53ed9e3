from drf_spectacular.extensions import OpenApiAuthenticationExtension


class CookieOrHeaderJWTAuthenticationScheme(OpenApiAuthenticationExtension):
    target_class = "hr_core.iam.auth.CookieOrHeaderJWTAuthentication"
    name = "PortalJWT"

    def get_security_definition(self, auto_schema):
        return {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": (
                "Access token from `auth/token/` sent as `Authorization: Bearer <token>`. "
                "Browser portals log in through `auth/login/` and send the `hr_access` cookie instead."
            ),
        }
