class ApiError(Exception):
    """Base error carrying the HTTP status and a stable machine-readable code."""

    status_code = 500
    code = "ApiError"
    default_message = "Erreur serveur"

    def __init__(self, message: str = None, status_code: int = None, code: str = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 400
    code = "ValidationError"
    default_message = "Données invalides"


class InvalidOrUsedCode(ValidationError):
    code = "InvalidOrUsedCode"
    default_message = "Code invalide ou déjà utilisé"


class CodeExpired(ValidationError):
    code = "CodeExpired"
    default_message = "Code expiré, veuillez en demander un nouveau"


class Conflict(ApiError):
    status_code = 400
    code = "Conflict"
    default_message = "Cet email est déjà utilisé"


class AuthError(ApiError):
    status_code = 401
    code = "AuthError"
    default_message = "Token d'accès requis"


class InvalidCredentials(AuthError):
    code = "InvalidCredentials"
    default_message = "Identifiants incorrects"


class InvalidToken(AuthError):
    status_code = 403
    code = "InvalidToken"
    default_message = "Token invalide"


class NotFound(ApiError):
    status_code = 404
    code = "NotFound"
    default_message = "Ressource non trouvée"


class TransientError(ApiError):
    status_code = 500
    code = "Transient"
    default_message = "Erreur serveur"
