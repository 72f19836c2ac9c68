from nginxconf.quoting import enquote
from nginxconf.tree import NginXComment, NginXConfig, NginXDirective


def format_statement(directive):
  words = [directive.name] + list(directive.arguments)
  return ' '.join(enquote(word) for word in words)


def is_inline_comment(node, previous):
  if not isinstance(node, NginXComment) or not isinstance(previous, NginXDirective):
    return False
  if previous.IsBlock() or previous.line is None:
    return False
  return node.line == previous.line


def format_nodes(nodes, idt=0, indent='  ', open_blocks=frozenset()):
  spacer = indent * idt
  lines = []
  previous = None
  for node in nodes:
    if isinstance(node, NginXComment):
      if '\n' in node.text:
        raise ValueError(f'comment spans several lines: {node.text!r}')
      # a statement with a multi-line argument no longer ends on its own line
      if lines and '\n' not in lines[-1] and is_inline_comment(node, previous):
        lines[-1] += f' #{node.text}'
      else:
        lines.append(f'{spacer}#{node.text}')
    elif isinstance(node, NginXDirective):
      statement = format_statement(node)
      if node.IsBlock():
        if id(node) in open_blocks:
          raise ValueError(f'"{node.name}" block contains itself')
        lines.append(f'{spacer}{statement} {{')
        lines.extend(format_nodes(
          node.children, idt+1, indent, open_blocks | {id(node)}))
        lines.append(f'{spacer}}}')
      else:
        lines.append(f'{spacer}{statement};')
    else:
      raise TypeError(f'cannot build {node.__class__.__name__}: {node!r}')
    previous = node
  return lines


def build(tree, indent='  ', tabs=False):
  if tabs:
    indent = '\t'
  if isinstance(tree, NginXConfig):
    nodes = tree.children
  elif isinstance(tree, (NginXDirective, NginXComment)):
    nodes = [tree]
  else:
    nodes = tree
  lines = format_nodes(nodes, 0, indent)
  if not lines:
    return ''
  return '\n'.join(lines) + '\n'
