
WHITESPACE = (' ', '\t', '\n', '\r')
QUOTES = ('"', "'")

# any of these inside an argument forces it to be written in double quotes
NEEDS_QUOTES = set(WHITESPACE) | set(QUOTES) | {'{', '}', ';', '#', '\\'}


def unescape(unit, quote=None):
  """Resolve a backslash unit produced by the lexer.

  Only an escaped backslash, or an escaped copy of the quote currently being
  read, collapse to the bare character. Anything else (\\$, \\n, \\{ ...) is
  left for nginx to interpret and keeps its backslash.
  """
  if len(unit) == 2 and unit[0] == '\\':
    if unit[1] == '\\' or (quote is not None and unit[1] == quote):
      return unit[1]
  return unit


def needs_quotes(arg):
  if arg == '':
    return True
  if getattr(arg, 'quoted', False):
    return True
  return any(c in NEEDS_QUOTES for c in arg)


def escape(arg):
  return str(arg).replace('\\', '\\\\').replace('"', '\\"')


def enquote(arg):
  if needs_quotes(arg):
    return f'"{escape(arg)}"'
  return str(arg)
