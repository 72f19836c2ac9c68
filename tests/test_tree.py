import pytest

from nginxconf.parser import parse
from nginxconf.tree import NginXArgument, NginXComment, NginXConfig, NginXDirective


def test_argument_compares_as_string():
  arg = NginXArgument('on', quoted=True)
  assert arg == 'on'
  assert arg.quoted
  assert not NginXArgument('on').quoted
  assert repr(arg) == "NginXArgument('on', quoted=True)"


def test_equality_ignores_lines():
  assert NginXDirective('a', ['b'], line=1) == NginXDirective('a', ['b'], line=7)
  assert NginXComment('x', 1) == NginXComment('x', 2)
  assert NginXDirective('a', []) != NginXDirective('a', [], children=[])
  assert NginXDirective('a', []) != NginXComment('a')


def test_walk_is_depth_first():
  config = parse('a { b { c; } #d\n } e;')
  names = [
    node.name if isinstance(node, NginXDirective) else node.text
    for node in config.Walk()]
  assert names == ['a', 'b', 'c', 'd', 'e']


def test_named_directive_lookup_skips_comments():
  config = parse('#listen\nlisten 80; listen 443;')
  assert config.HasDirective('listen')
  assert not config.HasDirective('server')
  assert config.NamedDirective('listen').arguments == ['80']
  assert [d.arguments for d in config.NamedDirectives('listen')] == [['80'], ['443']]
  assert config.NamedDirective('server') is None


def test_set_named_directive():
  config = parse('events { worker_connections 512; }')
  events = config.NamedDirective('events')
  events.SetNamedDirective('worker_connections', ['1024'])
  events.SetNamedDirective('multi_accept', ['on'])
  assert events.children == [
    NginXDirective('worker_connections', ['1024']),
    NginXDirective('multi_accept', ['on']),
  ]


def test_set_named_directive_on_simple_directive():
  with pytest.raises(TypeError):
    NginXDirective('a', []).SetNamedDirective('b', ['1'])


def test_set_named_directive_on_empty_block():
  block = NginXDirective('events', [], children=[])
  block.SetNamedDirective('worker_connections', ['64'])
  assert block.children == [NginXDirective('worker_connections', ['64'])]


def test_str_builds():
  config = parse('user nginx;')
  assert str(config) == 'user nginx;\n'
  assert str(config.children[0]) == 'user nginx;\n'
  assert str(NginXComment(' hi')) == '# hi'


def test_file_round_trip(tmp_path):
  config = NginXConfig.FromString('http { server { listen 80; } }')
  path = tmp_path / 'nginx.conf'
  config.WriteToFile(str(path), indent='    ')
  assert path.read_text() == 'http {\n    server {\n        listen 80;\n    }\n}\n'
  assert NginXConfig.FromFile(str(path)) == config
