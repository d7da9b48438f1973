"""config_loading.py"""
from pathlib import Path

from argtap.config import loader
from argtap.utils import run_parser

backup = loader(Path(__file__).parent / "argtap.yaml")

if __name__ == "__main__":
    run_parser(backup.parser)
    print(f"target:  {backup['target'].value}")
    print(f"exclude: {backup['exclude'].value}")
    print(f"since:   {backup['since'].value}")
    print(f"gzip:    {bool(backup['gzip'])}")
