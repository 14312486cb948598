"""
Bridging accumulated validation errors into exception-based code.

Run: python examples/raise_on_failure.py
"""
from validly import (
    ConsoleLogger,
    Rule,
    ValidationException,
    set_default_logger,
    validate_all,
)


positive = Rule.of(lambda n: n > 0, "must.be.positive")


def main():
    # debug records from the library go to stderr as JSON
    set_default_logger(ConsoleLogger(level="DEBUG", json_output=True))

    print("ok:", validate_all([1, 2, 3], "amounts").are_all(positive).get_or_raise())
    try:
        validate_all([5, -1, 0], "amounts").are_all(positive).get_or_raise()
    except ValidationException as ex:
        for message in ex.messages():
            print("error:", message)


if __name__ == "__main__":
    main()
