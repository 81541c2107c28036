"""
Basic optionals: construction, chaining, fallbacks, and opt-in logging.

Run: python examples/basic_optional.py
"""
from optionalpy import Optional, ConsoleLogger, require_non_empty


def find_user(users, name):
    return Optional.of_nullable(users.get(require_non_empty(name, "name is required")))


def main():
    users = {"ada": {"email": "ada@example.com"}, "bob": {"email": None}}
    logger = ConsoleLogger(level="DEBUG")

    # map collapses a None result to empty, so no intermediate checks are needed
    ada = logger.optional("ada.email", find_user(users, "ada").map(lambda u: u["email"]))
    bob = logger.optional("bob.email", find_user(users, "bob").map(lambda u: u["email"]))
    print("ada =>", ada.or_else("<none>"))      # ada@example.com
    print("bob =>", bob.or_else("<none>"))      # <none>

    # filter + or_else_get: the producer only runs when the value is missing
    domain = ada.map(lambda e: e.split("@")[1]).filter(lambda d: d.endswith(".com"))
    print("domain =>", domain.or_else_get(lambda: "unknown"))

    try:
        find_user(users, "carol").or_else_raise(lambda: LookupError("no such user: carol"))
    except LookupError as ex:
        print("carol =>", ex)


if __name__ == "__main__":
    main()
