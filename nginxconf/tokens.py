from collections import namedtuple

class TOKEN(object):
  def isA(self, cls):
    return self.__class__ == cls
  def __str__(self):
    return self.__class__.__name__[6:]
  def __repr__(self):
    return str(self)

class TOKEN_STRING(TOKEN, namedtuple('TOKEN_STRING', ['line', 'value', 'is_quoted'])):
  def __str__(self):
    if self.is_quoted:
      return f'{self.__class__.__name__[6:]}("{self.value}")'
    return f'{self.__class__.__name__[6:]}({self.value})'

class TOKEN_COMMENT(TOKEN, namedtuple('TOKEN_COMMENT', ['line', 'value'])):
  is_quoted = False
  def __str__(self):
    return f'{self.__class__.__name__[6:]}({self.value})'

class TOKEN_SEMICOLON(TOKEN, namedtuple('TOKEN_SEMICOLON', ['line'])):
  value = ';'
  is_quoted = False

class TOKEN_OPEN_BRACE(TOKEN, namedtuple('TOKEN_OPEN_BRACE', ['line'])):
  value = '{'
  is_quoted = False

class TOKEN_CLOSE_BRACE(TOKEN, namedtuple('TOKEN_CLOSE_BRACE', ['line'])):
  value = '}'
  is_quoted = False


STRUCTURAL = {
  ';': TOKEN_SEMICOLON,
  '{': TOKEN_OPEN_BRACE,
  '}': TOKEN_CLOSE_BRACE,
}
