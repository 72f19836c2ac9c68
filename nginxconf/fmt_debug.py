import sys

from nginxconf import builder, parser
from nginxconf.lexer import NginXLexer

BLACK  = '0'
RED    = '1'
GREEN  = '2'
YELLOW = '3'
PURPLE = '5'

def Color(fg=None, bg=None):
  if fg and bg:
    return f'\033[3{fg};4{bg}m'
  if fg:
    return f'\033[3{fg}m'
  if bg:
    return f'\033[4{bg}m'
  return '\033[0m'

def describe(entry):
  # _countLines pairs each unit with its line
  if isinstance(entry, tuple) and not hasattr(entry, 'isA'):
    entry = entry[0]
  if isinstance(entry, str):
    return repr(entry)[1:-1]
  return str(entry)

def highlightStream(stream, highlights):
  result = ''
  for entry in stream:
    add = describe(entry)
    for h in highlights:
      if add.startswith(h):
        add = f'{Color(RED)}{h}{Color()}{add[len(h):]}{Color()}'
    result += add + ' '
  return result

def main(argv=None):
  argv = sys.argv if argv is None else argv
  with open(argv[1], 'r') as f:
    content = f.read()
  stream = content
  highlight = []
  steps = {
    NginXLexer._readChars: [],
    NginXLexer._pairEscapes: ['\\\\'],
    NginXLexer._countLines: [],
    NginXLexer._tokenize: [
      'STRING', 'COMMENT', 'SEMICOLON', 'OPEN_BRACE', 'CLOSE_BRACE'],
  }
  for step, newhighlight in steps.items():
    if stream is not content:
      print(highlightStream(stream, highlight))
    highlight = newhighlight
    print(f'Press [Enter] to run {Color(GREEN)}{step.__name__}{Color()} on the previous stream')
    input()
    stream = list(step(stream))
  print(highlightStream(stream, highlight))
  print(f'Press [Enter] to {Color(GREEN)}build{Color()} the parsed tree')
  input()
  print(builder.build(parser.NginXParser().ParseStream(stream)), end='')

if __name__ == '__main__':
  main()
