"""
Validating a multi-field form and reporting every error with its location.

Run: python examples/signup_form.py
"""
from dataclasses import dataclass

from validly import Rule, map3, validate_that, validate_all


@dataclass(frozen=True)
class Signup:
    username: str
    age: int
    emails: tuple


not_empty = Rule.of(lambda s: s.strip() != "", "must.not.be.empty")
short_enough = Rule.of(lambda s: len(s) <= 16, "must.be.at.most.16.chars")
adult = Rule.of(lambda n: n >= 18, "must.be.adult")
looks_like_email = Rule.of(lambda s: "@" in s, "must.contain.at.sign")


def validate_signup(form: Signup):
    return map3(
        validate_that(form.username, "username").is_(not_empty & short_enough),
        validate_that(form.age, "age").is_(adult),
        validate_all(form.emails, "emails").are_all(not_empty & looks_like_email),
        Signup,
    )


def main():
    good = Signup("ada", 36, ("ada@example.org",))
    bad = Signup("", 12, ("ada@example.org", "nope", ""))

    for form in (good, bad):
        result = validate_signup(form)
        print(result.fold(
            lambda errors: "invalid: " + ", ".join(e.render() for e in errors),
            lambda signup: f"valid: {signup}",
        ))


if __name__ == "__main__":
    main()
