"""
Basic options: lookups, parsing, thresholds and fallbacks.

Run: python examples/basic_option.py
"""
from foldopt import Some, NONE, from_nullable, ConsoleLogger
from foldopt import combinators as opt


def main():
    log = ConsoleLogger(name="basic_option")
    prices = {"tea": "£16.10", "coffee": None}

    # Lookup -> Option
    tea = from_nullable(prices.get("tea"))
    coffee = from_nullable(prices.get("coffee"))
    log.info("lookup", tea=tea, coffee=coffee)

    # Exactly one of the two is priced
    log.info("xor", result=opt.xor(coffee, tea))

    # Parse and threshold
    qty = opt.map(Some("42"), int)
    big = opt.filter(Some(101.5), lambda x: x > 100.0)
    log.info("derived", qty=qty, big=big)

    # Lazy fallback: the thunk only runs when the option is empty
    fallback = opt.or_else(NONE, lambda: Some("£0.00"))
    log.info("fallback", value=opt.get_or_else(fallback, "n/a"))


if __name__ == "__main__":
    main()
