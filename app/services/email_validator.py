"""Email syntax check via the email-validator package (no DNS lookups)."""

from email_validator import EmailNotValidError, validate_email

from app.protocols import EmailValidator


class EmailValidatorAdapter(EmailValidator):
    def is_valid(self, email: str) -> bool:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
