"""Scan a Lox snippet and print its tokens, then check for errors."""

from loxlex import ErrorCollector, scan

errors = ErrorCollector()
tokens = scan('var greeting = "hello";\nprint greeting != nil;', reporter=errors)

for token in tokens:
    print(token)

if errors.had_error:
    for error in errors.errors:
        print(error)
