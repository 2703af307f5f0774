from packrat.Config import ParserConfig
from packrat.Prim import run_parser

# 1. Input: a tiny versioned header, e.g. "v1\n"
# Only the core primitives are available, so steps are threaded with either.

def version_header(p):
    return p.char("v").either(
        lambda ok: ok.one_of("0123456789").either(
            lambda digit: digit.char("\n").label("Expected a newline after the version"),
            lambda err: err,
        ),
        lambda err: err.label("Expected a version header such as v1"),
    )


def body_keyword(p):
    return version_header(p).either(
        lambda ok: ok.string("BEGIN"),
        lambda err: err,
    )


if __name__ == "__main__":
    config = ParserConfig(source_name="header.txt", context_depth=1)

    for text in ["v1\nBEGIN", "v1\nBEGN", "x1\nBEGIN", "v1 BEGIN"]:
        value, err = run_parser(text, body_keyword, config)
        if err:
            print("Parsing Failed:", err)
        else:
            print("Successfully Parsed:", value)
        print()
