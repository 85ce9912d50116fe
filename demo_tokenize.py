#!/usr/bin/env python3
"""
Demo: Tokenize and parse LTSV text.

Shows the lazy tokenizer (errors as items), the eager parser,
and rendering back to LTSV / YAML.
"""

from ltsv import tokenize, parse, ParseError
from ltsv.serialization import records_to_yaml


SAMPLE = (
    "host:127.0.0.1\tident:-\tuser:frank\ttime:[10/Oct/2000:13:55:36 -0700]\tstatus:200\n"
    "host:10.0.0.2\tbroken_field\tstatus:404\n"
    "host:10.0.0.3\treq:GET /index.html HTTP/1.0\tstatus:200\n"
)


def main():
    print("=" * 80)
    print("LAZY TOKENIZER")
    print("=" * 80)

    for record in tokenize(SAMPLE):
        print(f"\nrecord {record.line}:")
        for item in record:
            if isinstance(item, ParseError):
                print(f"  ! {item}")
            else:
                print(f"  {item.label:<8} = {item.field}")

    print("\n" + "=" * 80)
    print("EAGER PARSER")
    print("=" * 80)

    try:
        parse(SAMPLE)
    except ParseError as e:
        print(f"\nparse() failed: {e}")

    good = "\n".join(line for line in SAMPLE.splitlines() if "broken" not in line)
    records = parse(good)
    print(f"\nparsed {len(records)} records")
    for record in records:
        print("  " + " | ".join(str(p) for p in record))

    print("\nAs YAML:")
    print(records_to_yaml(records))


if __name__ == "__main__":
    main()
