
class NginXError(ValueError):
  def __init__(self, message, line=None):
    super().__init__(message, line)
    self.message = message
    self.line = line

  def __str__(self):
    if self.line is None:
      return self.message
    return f'{self.message} (line {self.line})'


class LexError(NginXError):
  pass


class UnterminatedQuote(LexError):
  def __init__(self, quote, line):
    super().__init__(f'unterminated {quote} quote', line)
    self.quote = quote


class ParseError(NginXError):
  pass


class UnexpectedCloseBrace(ParseError):
  def __init__(self, line):
    super().__init__('unexpected "}"', line)


class UnclosedBlock(ParseError):
  def __init__(self, name, line):
    super().__init__(f'unexpected end of file, expecting "}}" for "{name}"', line)
    self.name = name


class UnterminatedDirective(ParseError):
  def __init__(self, name, line):
    super().__init__(
      f'unexpected end of file, expecting ";" or "{{" after "{name}"', line)
    self.name = name


class UnexpectedTerminator(ParseError):
  def __init__(self, terminator, line):
    super().__init__(f'unexpected "{terminator}"', line)
    self.terminator = terminator
