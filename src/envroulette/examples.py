"""
Example environment file builder.

Builds a small .env body that exercises every check once: a clean
variable, an empty value, an unquoted space, a weak secret, a masked key
and an unparsable line, plus comments and blank lines.
"""


def build_example_env(app_name: str = "roulette", secret: str = "abc") -> str:
    lines = [
        "# Example environment file",
        f"APP_NAME={app_name}",
        "",
        "DATABASE_URL=",
        "GREETING=hello world",
        f"API_SECRET={secret}",
        "STRIPE_KEY=sk_test_1234567890",
        "   # indented comment",
        "not a valid line !!",
        "DEBUG",
    ]
    return "\n".join(lines) + "\n"
