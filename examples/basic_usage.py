"""
Basic usage example
===================

Shows both generation strategies and the debug logging hook:
- counter-based IDs that never collide within one generator
- random IDs of a fixed length
- resetting the counter

Run:
    python examples/basic_usage.py
"""

import logging

from frugal_id import (
    CounterIdGenerator,
    GeneratorOptions,
    InvalidLengthError,
    ShortUid,
)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    gen = ShortUid(GeneratorOptions(debug=True))
    print(f"Dictionary ({gen.get_dict_length()}): {''.join(gen.get_dict())}")

    # ---- Counter IDs ----
    counter_ids = [gen.counter_uuid() for _ in range(5)]
    print(f"Counter IDs: {counter_ids} (counter={gen.get_counter()})")

    gen.reset_counter()
    print(f"After reset: {gen.counter_uuid()}")

    # ---- Random IDs ----
    print(f"Random (default length): {gen.random_uuid()}")
    print(f"Random (length 12): {gen.random_uuid(12)}")

    try:
        gen.random_uuid(0)
    except InvalidLengthError as exc:
        print(f"Rejected length 0: {exc}")

    # ---- Pluggable IdGenerator ----
    ids = CounterIdGenerator(ShortUid())
    print(f"Via IdGenerator: {[ids.generate() for _ in range(3)]}")


if __name__ == "__main__":
    main()
