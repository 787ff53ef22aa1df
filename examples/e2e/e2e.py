"""
glisp End-to-End Example

Demonstrates the full front-end pipeline:
1. Parse source text into a syntax tree
2. Analyze the tree into a Program
3. Report a semantic error with key-name suggestions
4. Report a recoverable (unterminated list) error
5. Encode a diagnostic for editor tooling

Run: pip install -e . && python examples/e2e/e2e.py
"""

from glisp import check_source, compile_source, parse
from glisp.encoding import dumps, encode_diagnostic

print("=== glisp E2E Demo ===\n")

source = """(init (set x 0))
(update (if (key-down @right) (set x (+ x 1))))
(draw (clear 0) (rect x 10 8 8 7))"""

# 1. Parse
tree = parse(source)
print(f"1. Parsed {len(tree)} top-level forms\n")

# 2. Analyze
program = compile_source(source)
print("2. Compiled program")
for handler in ("init", "update", "draw"):
    body = getattr(program, handler)
    print(f"   {handler}: {len(body)} expression(s)")
print()

# 3. Misspelled key name
diag = check_source("(update (key-down @rigth))")
print("3. Misspelled key name")
print(f"   {diag}\n")

# 4. Unterminated list
diag = check_source("(init (set x 5)")
print("4. Unterminated list")
print(f"   {diag} (recoverable: {diag.recoverable})\n")

# 5. Encoded diagnostic
print("5. Encoded diagnostic")
print(f"   {dumps(encode_diagnostic(diag))}")
