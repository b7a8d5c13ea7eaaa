# depconie/config.py
import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

# Определение базовых путей относительно корня проекта
BASE_DIR = Path(__file__).resolve().parent.parent
CONFIG_DIR = BASE_DIR / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "depconie.yaml"


class ExtractorSettings(BaseModel):
    """Настройки извлечения аргументов."""

    # Выгрузка Morphy; None - фильтрация по падежу отключена
    lexicon_path: Optional[Path] = None
    case_filtering: bool = True
    # Суффиксы, по которым запасной оракул считает форму неименительной
    non_nominative_suffixes: List[str] = Field(default_factory=list)
    # True - неоднозначное подлежащее бросает AmbiguousSubjectError вместо выбора ближайшего
    strict_subjects: bool = False
    max_pp_size: int = 10
    show_progress: bool = False

    @field_validator('max_pp_size')
    @classmethod
    def check_pp_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"max_pp_size must be positive, got {value}")
        return value


def load_config(path=DEFAULT_CONFIG_PATH) -> ExtractorSettings:
    """
    Читает YAML-конфиг (секция 'extraction').
    Относительный lexicon_path считается от каталога конфига.
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        raw = yaml.safe_load(f) or {}

    section = raw.get('extraction', raw)
    settings = ExtractorSettings(**section)

    if settings.lexicon_path is not None and not settings.lexicon_path.is_absolute():
        settings.lexicon_path = (path.parent / settings.lexicon_path).resolve()

    logger.info(f"Loaded config from {path}")
    return settings
