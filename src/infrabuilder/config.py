import yaml
import logging
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, ValidationError, model_validator, field_validator, ConfigDict

from . import constants
from .engines import create_engine
from .exceptions import (
    ConfigParsingError,
    ConfigFileMissingError,
    ConfigValidationError,
    NamingStrategyError,
)
from .protocols import ProvisioningEngineProtocol
from .strategies import PatternNamingStrategy, StaticTaggingStrategy, StrategyContext
from .utils import setup_logger


logger = logging.getLogger(__name__)


class NamingModel(BaseModel):
    """
        Class Config-Validation Model describe `naming`
    """
    pattern: str = "{name}"
    variables: Dict[str, str] = Field(default_factory=dict)
    lowercase: bool = False
    max_length: Optional[int] = Field(default=None, gt=0)
    hash_length: int = Field(default=constants.DEFAULT_HASH_LENGTH, gt=0)
    hash_seed: str = ""
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode='after')
    def check_pattern_fields(self) -> 'NamingModel':
        """Check the pattern with the same rules the naming strategy applies"""
        try:
            self.strategy()
        except NamingStrategyError as e:
            raise ValueError(str(e))
        return self

    def strategy(self) -> PatternNamingStrategy:
        return PatternNamingStrategy(**self.model_dump())


class TaggingModel(BaseModel):
    """
        Class Config-Validation Model describe `tagging`
    """
    tags: Dict[str, str] = Field(default_factory=dict)
    model_config = ConfigDict(extra="forbid")

    def strategy(self) -> StaticTaggingStrategy:
        return StaticTaggingStrategy(self.tags)


class LoggingModel(BaseModel):
    """
        Class Config-Validation Model describe `logging`
    """
    debug: bool = False
    levels: Dict[str, str] = Field(default_factory=dict)
    file: Optional[str] = None
    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """
        Class Config-Validation Model desribe top-level of config
    """
    naming: Optional[NamingModel] = None
    tagging: Optional[TaggingModel] = None
    engine: str = constants.ENGINE_MEMORY
    logging: LoggingModel = Field(default_factory=LoggingModel)
    model_config = ConfigDict(extra="forbid")

    @field_validator('engine')
    @classmethod
    def validate_engine(cls, engine: str) -> str:
        """Ensure the engine is one of the bundled ones"""
        if engine not in constants.SUPPORTED_ENGINES:
            raise ValueError(f"Invalid engine: {engine}, must be one of {list(constants.SUPPORTED_ENGINES)}.")
        return engine


class Config:
    """
    Loads and validates the settings file using Pydantic models.
    It is the sole gatekeeper for configuration.
    """
    def __init__(self, config_path: str):
        self.path = config_path
        logger.info(f"Loading configuration from '{self.path}'...")
        raw_data = self._load_raw_config()

        logger.info("Validating configuration structure with Pydantic...")
        try:
            self.model = ConfigModel.model_validate(raw_data)
            logger.debug(f"Configuration model validated successfully: \n{self.model.model_dump_json(indent=2)}")
            logger.info("Configuration validation passed.")
        except ValidationError as e:
            raise ConfigValidationError(f"Configuration validation failed:\n{e}")

    def _load_raw_config(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
            if not isinstance(config_data, dict):
                raise ConfigParsingError("Configuration file must be a YAML document containing a dictionary.")
            logger.debug(f"Successfully parsed YAML from '{self.path}'.")
            return config_data
        except FileNotFoundError:
            raise ConfigFileMissingError(f"Configuration file not found at: {self.path}")
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Error parsing YAML file: {e}")

    @property
    def naming(self) -> Optional[NamingModel]:
        return self.model.naming

    @property
    def tagging(self) -> Optional[TaggingModel]:
        return self.model.tagging

    @property
    def engine_name(self) -> str:
        return self.model.engine

    def strategies(self) -> StrategyContext:
        return StrategyContext(
            naming=self.naming.strategy() if self.naming is not None else None,
            tagging=self.tagging.strategy() if self.tagging is not None else None,
        )

    def engine(self) -> ProvisioningEngineProtocol:
        return create_engine(self.engine_name)

    def apply_logging(self):
        settings = self.model.logging
        setup_logger(debug=settings.debug, module_levels=settings.levels or None, log_file=settings.file)
