import pytest
import yaml
from topsort.core.config import Config, load_config
from topsort.core.errors import ConfigError


def test_defaults():
    config = load_config()
    assert config == Config()
    assert config.edge_sep == '-'
    assert config.pair_sep == ','
    assert config.top_sort is False
    assert config.classifier_name == 'Depth-First'


def test_load_yaml(tmp_path):
    path = tmp_path / 'topsort.yaml'
    path.write_text('edge_sep: ">"\npair_sep: ";"\ntop_sort: true\nverbosity: 2\n')

    config = load_config(str(path))
    assert config.edge_sep == '>'
    assert config.pair_sep == ';'
    assert config.top_sort is True
    assert config.verbosity == 2
    assert config.json_logs is False
    assert config.classifier_name == 'Top Sort'


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text('')
    assert load_config(str(path)) == Config()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / 'nope.yaml'))


def test_invalid_yaml(tmp_path):
    path = tmp_path / 'bad.yaml'
    path.write_text('edge_sep: [unclosed\n')
    with pytest.raises(yaml.YAMLError):
        load_config(str(path))


@pytest.mark.parametrize('content', [
    'top_sort: "yes please"\n',
    'verbosity: true\n',
    'edge_sep: 3\n',
    '- a\n- b\n',
    'algorithm: dfs\n',
])
def test_rejects_bad_values(tmp_path, content):
    path = tmp_path / 'bad.yaml'
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_config(str(path))
