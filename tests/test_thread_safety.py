"""Thread safety tests for the lexer.

Scan state lives inside each tokenize() call, so lexers running in
parallel threads (including different set-delimiters sequences) must not
see each other's delimiters.
"""

from concurrent.futures import ThreadPoolExecutor

from mustachio import Lexer, TokenType, tokenize
from mustachio.generator import ExpressionGenerator
from mustachio.expressions import Filter, Identifier, Scoped


def _template(index: int) -> str:
    opening, closing = ("<%", "%>") if index % 2 else ("[[", "]]")
    return (
        f"{{{{#items}}}}{{{{={opening} {closing}=}}}}"
        + f"{opening}name{index}{closing}" * 20
        + f"{opening}/items{closing}{{{{x}}}}"
    )


class TestLexerThreadSafety:
    """Separate lexers share no mutable state."""

    def test_concurrent_tokenize(self) -> None:
        sources = [_template(i) for i in range(32)]
        expected = [tokenize(source) for source in sources]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(tokenize, sources))

        assert results == expected

    def test_delimiters_do_not_leak(self) -> None:
        def run(index: int) -> set:
            tokens = tokenize(_template(index))
            return {
                tuple(t.tag_delimiter_pair)
                for t in tokens
                if t.type == TokenType.ESCAPED_VARIABLE
            }

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(run, range(32)))

        for index, pairs in enumerate(results):
            expected = ("<%", "%>") if index % 2 else ("[[", "]]")
            assert pairs == {expected}

    def test_shared_lexer_independent_iterators(self) -> None:
        """Two iterators over one Lexer do not interfere."""
        lexer = Lexer(_template(1))
        first = lexer.tokenize()
        second = lexer.tokenize()

        interleaved = []
        for a, b in zip(first, second):
            interleaved.append((a, b))

        assert all(a == b for a, b in interleaved)


class TestGeneratorThreadSafety:
    def test_shared_generator(self) -> None:
        generator = ExpressionGenerator()
        expressions = [
            Filter(Identifier(f"f{i}"), Scoped(Identifier("a"), f"b{i}")) for i in range(100)
        ]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(generator.string_from_expression, expressions))

        assert results == [f"f{i}(a.b{i})" for i in range(100)]
