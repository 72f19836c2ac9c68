from nginxconf.builder import build
from nginxconf.errors import (
  LexError, NginXError, ParseError, UnclosedBlock, UnexpectedCloseBrace,
  UnexpectedTerminator, UnterminatedDirective, UnterminatedQuote)
from nginxconf.lexer import NginXLexer, lex
from nginxconf.parser import NginXParser, parse
from nginxconf.tokens import (
  TOKEN, TOKEN_CLOSE_BRACE, TOKEN_COMMENT, TOKEN_OPEN_BRACE, TOKEN_SEMICOLON,
  TOKEN_STRING)
from nginxconf.tree import (
  NginXArgument, NginXComment, NginXConfig, NginXDirective, NginXObject)

__version__ = '0.1.0'
