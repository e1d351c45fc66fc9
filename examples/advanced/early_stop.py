"""Push tokens to a consumer that stops at the first partial."""

from mustachio import Lexer, ParseError, Token, TokenType


class FirstPartialFinder:
    def __init__(self) -> None:
        self.partial: str | None = None

    def should_continue_after(self, token: Token) -> bool:
        if token.type == TokenType.PARTIAL:
            self.partial = token.content.strip()
            return False
        return True

    def did_fail(self, error: ParseError) -> None:
        print("error:", error)


finder = FirstPartialFinder()
# The unclosed tag at the end is never reached
Lexer("<h1>{{title}}</h1>{{> header }}{{> footer}}{{oops").parse(finder)
print("first partial:", finder.partial)
