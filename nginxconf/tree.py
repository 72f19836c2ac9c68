import logging

logger = logging.getLogger(__name__)


class NginXArgument(str):
  """A directive argument that remembers whether it was quoted in the source."""

  def __new__(cls, value, quoted=False):
    self = super().__new__(cls, value)
    self.quoted = quoted
    return self

  def __repr__(self):
    if self.quoted:
      return f'NginXArgument({str.__repr__(self)}, quoted=True)'
    return str.__repr__(self)


class NginXObject(object):
  def __init__(self, children=None):
    self.children = [] if children is None else list(children)

  def __str__(self):
    from nginxconf import builder
    return builder.build(self)

  def __eq__(self, other):
    if type(self) != type(other):
      return NotImplemented
    return self._key() == other._key()

  __hash__ = None

  def _key(self):
    return (self.children,)

  def Walk(self):
    for child in self.children or []:
      yield child
      if isinstance(child, NginXObject):
        yield from child.Walk()

  def _directives(self):
    for child in self.children or []:
      if isinstance(child, NginXDirective):
        yield child

  def NamedDirectives(self, name):
    return [d for d in self._directives() if d.name == name]

  def NamedDirective(self, name):
    for directive in self._directives():
      if directive.name == name:
        return directive
    return None

  def HasDirective(self, name):
    return self.NamedDirective(name) is not None

  def SetNamedDirective(self, name, arguments):
    if self.children is None:
      raise TypeError(f'cannot add "{name}" to a simple directive')
    directive = self.NamedDirective(name)
    if directive is None:
      directive = NginXDirective(name, arguments)
      self.children.append(directive)
    else:
      directive.arguments = list(arguments)
    return directive


class NginXConfig(NginXObject):
  """The implicit top-level block of a configuration."""

  def __repr__(self):
    return f'NginXConfig({self.children!r})'

  @classmethod
  def FromString(cls, content, **options):
    from nginxconf import parser
    return parser.parse(content, **options)

  @classmethod
  def FromFile(cls, filename, **options):
    from nginxconf import parser
    logger.debug('reading %s', filename)
    with open(filename, 'r') as f:
      return parser.parse(f, **options)

  def WriteToFile(self, filename, **options):
    from nginxconf import builder
    logger.debug('writing %s', filename)
    with open(filename, 'w') as f:
      f.write(builder.build(self, **options))


class NginXDirective(NginXObject):
  def __init__(self, name, arguments=(), line=None, children=None):
    super().__init__()
    self.name = name
    self.arguments = list(arguments)
    self.line = line
    self.children = None if children is None else list(children)

  def __repr__(self):
    if self.children is None:
      return f'NginXDirective({self.name!r}, {self.arguments!r})'
    return f'NginXDirective({self.name!r}, {self.arguments!r}, children={self.children!r})'

  def _key(self):
    return (self.name, [str(a) for a in self.arguments], self.children)

  def IsBlock(self):
    return self.children is not None


class NginXComment(object):
  def __init__(self, text, line=None):
    self.text = text
    self.line = line

  def __repr__(self):
    return f'NginXComment({self.text!r})'

  def __str__(self):
    return f'#{self.text}'

  def __eq__(self, other):
    if type(self) != type(other):
      return NotImplemented
    return self.text == other.text

  __hash__ = None
