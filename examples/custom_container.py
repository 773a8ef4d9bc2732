"""
Custom containers: anything with a fold method gets every combinator.

Run: python examples/custom_container.py
"""
from foldopt import Maybe, Some, ConsoleLogger
from foldopt import combinators as opt


class EnvVar:
    """An environment lookup; present when the variable is set and non-empty."""

    def __init__(self, environ, key):
        self.raw = environ.get(key, "")

    def fold(self, default, f):
        return f(self.raw) if self.raw else default


def main():
    log = ConsoleLogger(name="custom_container", level="DEBUG")
    env = {"PORT": "8080", "HOST": ""}

    port = opt.map(EnvVar(env, "PORT"), int)
    host = opt.or_else(EnvVar(env, "HOST"), lambda: Maybe("localhost"))
    log.info("config", port=port, host=opt.get_or_else(host, "?"))

    # Containers mix freely
    log.debug("xor", result=opt.xor(Maybe(None), Some(1)))


if __name__ == "__main__":
    main()
