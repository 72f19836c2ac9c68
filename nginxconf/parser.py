import logging

from nginxconf import errors
from nginxconf.lexer import lex
from nginxconf.tokens import (
  TOKEN_CLOSE_BRACE, TOKEN_COMMENT, TOKEN_OPEN_BRACE, TOKEN_SEMICOLON,
  TOKEN_STRING)
from nginxconf.tree import NginXArgument, NginXComment, NginXConfig, NginXDirective

logger = logging.getLogger(__name__)


class NginXParser(object):
  def __init__(self, comments=True, ignore=()):
    self.comments = comments
    self.ignore = frozenset(ignore)

  def ParseStream(self, stream):
    root = NginXConfig()
    # each entry is the node whose children receive new statements
    stack = [root]
    name = None
    name_line = None
    arguments = []

    for token in stream:
      current = stack[-1]
      if token.isA(TOKEN_STRING):
        if name is None:
          name = token.value
          name_line = token.line
        else:
          arguments.append(NginXArgument(token.value, token.is_quoted))
      elif token.isA(TOKEN_COMMENT):
        if self.comments:
          current.children.append(NginXComment(token.value, token.line))
      elif token.isA(TOKEN_SEMICOLON) or token.isA(TOKEN_OPEN_BRACE):
        if name is None:
          raise errors.UnexpectedTerminator(token.value, token.line)
        directive = NginXDirective(name, arguments, name_line)
        if token.isA(TOKEN_OPEN_BRACE):
          directive.children = []
          stack.append(directive)
        if name in self.ignore:
          logger.debug('ignoring "%s" on line %d', name, name_line)
        else:
          current.children.append(directive)
        name = None
        name_line = None
        arguments = []
      elif token.isA(TOKEN_CLOSE_BRACE):
        if name is not None or len(stack) == 1:
          raise errors.UnexpectedCloseBrace(token.line)
        stack.pop()
      else:
        raise ValueError(str(token))

    if name is not None:
      raise errors.UnterminatedDirective(name, name_line)
    if len(stack) > 1:
      raise errors.UnclosedBlock(stack[-1].name, stack[-1].line)
    logger.debug('parsed %d nodes', sum(1 for _ in root.Walk()))
    return root


def parse(source, comments=True, ignore=()):
  return NginXParser(comments=comments, ignore=ignore).ParseStream(lex(source))
