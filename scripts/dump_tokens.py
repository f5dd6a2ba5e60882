#!/usr/bin/env python
import sys
from pathlib import Path

from tslower.lexer import dump_tokens, lex


def main() -> None:
    if len(sys.argv) < 2:
        print("usage: dump_tokens.py INPUT [OUTPUT]", file=sys.stderr)
        sys.exit(2)

    input_path = Path(sys.argv[1]).expanduser()
    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else Path("out") / f"{input_path.stem}_tokens.txt"

    text = input_path.read_text(encoding="utf-8")
    tokens = lex(text)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_tokens(tokens) + "\n", encoding="utf-8")

    print(f"Wrote {len(tokens)} tokens to {output_path}")


if __name__ == "__main__":
    main()
