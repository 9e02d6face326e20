import logging
import secrets
import smtplib
from email.message import EmailMessage

from gestion_entretiens import config

logger = logging.getLogger(__name__)

CODE_MIN = 100000
CODE_MAX = 999999


def generate_verification_code() -> str:
    """Uniformly random 6-digit code in [100000, 999999]."""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


def _verification_html(code: str) -> str:
    return f"""
    <html>
      <body style="font-family: Arial, sans-serif; color: #333;">
        <h1>Gestion des Entretiens</h1>
        <p>Votre code de vérification pour créer votre compte :</p>
        <p style="font-size: 32px; font-weight: bold; letter-spacing: 8px;">{code}</p>
        <p>Ce code est valide pendant <strong>{config.VERIFICATION_CODE_TTL_MINUTES} minutes</strong>.</p>
        <p>Si vous n'avez pas demandé ce code, ignorez cet email.</p>
      </body>
    </html>
    """


def _welcome_html(nom: str) -> str:
    return f"""
    <html>
      <body style="font-family: Arial, sans-serif; color: #333;">
        <h1>Bienvenue {nom} !</h1>
        <p>Votre compte manager a été créé avec succès.</p>
        <p><a href="{config.FRONTEND_URL}">Accéder à mon espace</a></p>
      </body>
    </html>
    """


class Mailer:
    """SMTP transport. send_* methods return False instead of raising."""

    def __init__(self, host=None, port=None, user=None, password=None, sender=None, use_tls=None):
        self.host = host or config.EMAIL_HOST
        self.port = port or config.EMAIL_PORT
        self.user = user if user is not None else config.EMAIL_USER
        self.password = password if password is not None else config.EMAIL_PASS
        self.sender = sender or config.EMAIL_FROM
        self.use_tls = config.EMAIL_USE_TLS if use_tls is None else use_tls

    def _send(self, to: str, subject: str, html: str, text: str) -> bool:
        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content(text)
        msg.add_alternative(html, subtype="html")

        try:
            with smtplib.SMTP(self.host, self.port, timeout=config.EMAIL_TIMEOUT) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.user:
                    smtp.login(self.user, self.password or "")
                smtp.send_message(msg)
            return True
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Email to {to} failed: {e}", exc_info=True)
            return False

    def send_verification_code(self, email: str, code: str) -> bool:
        sent = self._send(
            email,
            "Code de vérification - Gestion Entretiens",
            _verification_html(code),
            f"Votre code de vérification : {code} (valide {config.VERIFICATION_CODE_TTL_MINUTES} minutes)",
        )
        if sent:
            logger.info(f"Verification code sent to {email}")
        return sent

    def send_welcome_email(self, email: str, nom: str) -> bool:
        sent = self._send(
            email,
            "Bienvenue sur Gestion Entretiens !",
            _welcome_html(nom),
            f"Bienvenue {nom} ! Votre compte manager a été créé avec succès.",
        )
        if sent:
            logger.info(f"Welcome email sent to {email}")
        return sent


def get_mailer() -> Mailer:
    return Mailer()
