"""
File loaders for configuration files.

Configuration files are relaxed JSON: comments and trailing commas are
allowed. Two views of a file are available, the plain Python value and the
json-five model tree, which keeps formatting so a file can be edited and
written back without losing comments.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Union

import json5
from json5.dumper import ModelDumper
from json5.dumper import dumps as dump_model
from json5.loader import ModelLoader
from json5.loader import loads as load_model
from json5.model import JSONObject, JSONText

from ngconfig.core.exceptions import LoadError

UTF8_BOM = b'\xef\xbb\xbf'


def read_config_text(path: Union[str, Path]) -> str:
    """Read a config file as UTF-8, dropping a leading byte order mark."""
    data = Path(path).read_bytes()
    if data.startswith(UTF8_BOM):
        data = data[len(UTF8_BOM):]
    return data.decode('utf-8')


class BaseConfigFileLoader(ABC):
    """
    Abstract base class for configuration file loaders.

    Subclasses turn file content into one representation; parser failures
    are raised as LoadError with the file path attached.
    """

    def load_file(self, path: Union[str, Path]) -> Any:
        """
        Load and parse a configuration file.

        Args:
            path: Path to the configuration file

        Returns:
            The parsed representation of the file
        """
        path = Path(path)
        try:
            return self.parse(read_config_text(path))
        except OSError:
            raise
        except Exception as e:
            raise LoadError(path, reason=str(e), cause=e) from e

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse configuration text."""
        pass

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'


class RelaxedJsonLoader(BaseConfigFileLoader):
    """Loads relaxed JSON into plain Python values."""

    def parse(self, text: str) -> Any:
        return json5.loads(text)


class JsonAstLoader(BaseConfigFileLoader):
    """Loads relaxed JSON into a json-five document node.

    The document keeps comments and whitespace around the top-level value;
    its ``value`` attribute is the top-level node itself.
    """

    def parse(self, text: str) -> JSONText:
        return load_model(text, loader=ModelLoader())


def is_json_object_node(node: Any) -> bool:
    """Check whether a model node, or the value of a document node, is a JSON object."""
    if isinstance(node, JSONText):
        node = node.value
    return isinstance(node, JSONObject)


def dump_json_ast(node: Any) -> str:
    """Serialize a model tree back to text, keeping comments and formatting."""
    return dump_model(node, dumper=ModelDumper())


def json_ast_to_value(node: Any) -> Any:
    """Convert a model tree into plain Python values."""
    return json5.loads(dump_json_ast(node))
