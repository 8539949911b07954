import configparser
from pathlib import Path
from typing import Any, Dict, Union

from confstore.utils.paths import expand_tilde_str


def load_ini_as_dict(ini_path: Union[str, Path]) -> Dict[str, Any]:
    """Load an INI file as ``{SECTION: {KEY: value}}``.

    Section names and keys are upper-cased, ``${section:key}`` references are interpolated and a leading '~' in a
    value is expanded. A missing file yields an empty dict, so the INI layer can be optional.
    """
    ini_path = Path(ini_path)
    if not ini_path.is_file():
        return {}

    parser = configparser.ConfigParser(interpolation=configparser.ExtendedInterpolation())
    parser.optionxform = str
    parser.read(ini_path, encoding="utf-8")

    return {
        section.upper(): {key.upper(): expand_tilde_str(value) for key, value in parser[section].items()}
        for section in parser.sections()
    }
