"""Field validation for contact submissions."""

from contactform.validation.rules import CONTACT_RULES, Rule, first_violation, validate_contact

__all__ = ["CONTACT_RULES", "Rule", "first_violation", "validate_contact"]
