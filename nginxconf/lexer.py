import codecs

from nginxconf import errors
from nginxconf.quoting import QUOTES, WHITESPACE, unescape
from nginxconf.tokens import STRUCTURAL, TOKEN_COMMENT, TOKEN_STRING

IDLE = 'IDLE'
WORD = 'WORD'
QUOTE = 'QUOTE'
COMMENT = 'COMMENT'


class NginXLexer(object):

  @classmethod
  def Steps(cls):
    return [
      cls._readChars,
      cls._pairEscapes,
      cls._countLines,
      cls._tokenize, # STRING, COMMENT, SEMICOLON, OPEN_BRACE, CLOSE_BRACE
    ]

  @classmethod
  def RunStream(cls, source):
    stream = source
    for step in cls.Steps():
      stream = step(stream)
    return stream

  @classmethod
  def _readChars(cls, source):
    if isinstance(source, bytes):
      source = source.decode('utf-8')
    if isinstance(source, str):
      yield from source
      return
    # one decoder for the whole stream so a character may span two chunks
    decoder = codecs.getincrementaldecoder('utf-8')()
    for chunk in source:
      if isinstance(chunk, bytes):
        chunk = decoder.decode(chunk)
      yield from chunk
    yield from decoder.decode(b'', final=True)

  @classmethod
  def _pairEscapes(cls, stream):
    stream = iter(stream)
    for char in stream:
      if char == '\\':
        yield char + next(stream, '')
      else:
        yield char

  @classmethod
  def _countLines(cls, stream):
    line = 1
    for char in stream:
      yield char, line
      line += char.count('\n')

  @classmethod
  def _tokenize(cls, stream):
    state = IDLE
    token = ''
    token_line = 0
    quote = None

    for char, line in stream:
      if state == COMMENT:
        if char.endswith('\n'):
          # a backslash right before the newline belongs to the comment
          token += char[:-1]
          yield TOKEN_COMMENT(token_line, token)
          state = IDLE
        else:
          token += char
        continue

      if state == QUOTE:
        if char == quote:
          yield TOKEN_STRING(token_line, token, True)
          state = IDLE
        else:
          token += unescape(char, quote)
        continue

      if state == WORD:
        if char not in WHITESPACE and char not in STRUCTURAL:
          token += unescape(char)
          continue
        yield TOKEN_STRING(token_line, token, False)
        state = IDLE

      if char in WHITESPACE:
        continue

      token_line = line
      if char == '#':
        token = ''
        state = COMMENT
      elif char in STRUCTURAL:
        yield STRUCTURAL[char](line)
      elif char in QUOTES:
        token = ''
        quote = char
        state = QUOTE
      else:
        token = unescape(char)
        state = WORD

    if state == QUOTE:
      raise errors.UnterminatedQuote(quote, token_line)
    if state == WORD:
      yield TOKEN_STRING(token_line, token, False)
    elif state == COMMENT:
      yield TOKEN_COMMENT(token_line, token)


def lex(source):
  return NginXLexer.RunStream(source)
