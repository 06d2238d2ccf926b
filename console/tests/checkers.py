"""Role checkers wired in through CONSOLE_RBAC_CHECKER in tests."""


def allow_all(user, *, feature, **options):
    return True


def deny_all(user, *, feature, **options):
    return False


def explode(user, *, feature, **options):
    raise RuntimeError("rbac backend unavailable")
