# Copyright (c) Meta Platforms, Inc. and affiliates.
import logging
import xml.etree.ElementTree as ET
from typing import Any, Literal

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pydantic import BaseModel, ConfigDict, field_validator

from seqcursor import SeqCursorError
from seqcursor.iterators.sequence_iterator import SequenceIterator
from seqcursor.iterators.tree_iterator import TreeIterator

logger = logging.getLogger()


def parse_xml(xml_path: str) -> ET.Element:
    try:
        return ET.parse(xml_path).getroot()
    except (ET.ParseError, OSError) as e:
        raise SeqCursorError(f"Could not parse {xml_path}: {e}") from e


def load_config(config_path: str, overrides: list[str] | None = None) -> dict:
    """
    Load a yaml config and merge dotted `key=value` overrides on top of it.
    """
    try:
        file_config = OmegaConf.load(config_path)
        cli_conf = OmegaConf.from_cli(overrides or [])
        conf_dict = OmegaConf.to_container(
            OmegaConf.merge(file_config, cli_conf),
            resolve=True,
            throw_on_missing=True,
        )
    except (OSError, yaml.YAMLError, OmegaConfBaseException) as e:
        raise SeqCursorError(f"Could not load config {config_path}: {e}") from e
    if not isinstance(conf_dict, dict):
        raise SeqCursorError(f"Config {config_path} must be a mapping")
    return conf_dict


class WalkArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # Exactly one of items or xml_path must be set
    items: list[Any] | None = None
    xml_path: str | None = None

    # Number of passes over the data, reset() between each
    loops: int = 1
    # Only print elements with this tag when walking xml
    tag: str | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    def build(self) -> SequenceIterator:
        if (self.items is None) == (self.xml_path is None):
            raise SeqCursorError("Exactly one of items and xml_path must be set")
        if self.loops < 1:
            raise SeqCursorError(f"loops must be at least 1, got {self.loops}")
        if self.items is not None:
            if self.tag is not None:
                raise SeqCursorError("tag only applies when walking xml_path")
            return SequenceIterator(self.items)
        return TreeIterator(parse_xml(self.xml_path))

    def dump_to_yaml_file(
        self, path: str, log_config: bool = True, sort_keys: bool = True
    ):
        model_dict = self.model_dump(mode="json")
        yaml_str = yaml.dump(
            model_dict,
            allow_unicode=True,
            sort_keys=sort_keys,
            default_flow_style=False,
        )
        with open(path, "w") as f:
            if log_config:
                logger.info("Using the following config for this walk:")
                logger.info(yaml_str)
            f.write(yaml_str)
