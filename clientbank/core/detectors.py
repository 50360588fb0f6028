"""
Document type detection from the free-form label of a document section.
"""
import yaml
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union
import logging

from ..models.types import DocumentType

logger = logging.getLogger(__name__)

DEFAULT_ALIASES_PATH = Path(__file__).parent.parent / "config" / "document_types.yaml"


class DocumentTypeDetector:
    """Maps document labels such as "Платёжное поручение" to DocumentType."""

    def __init__(self, alias_files: Optional[Iterable[Union[str, Path]]] = None):
        self.aliases: Dict[str, DocumentType] = {}
        self._load_aliases(DEFAULT_ALIASES_PATH)
        for alias_file in alias_files or []:
            self._load_aliases(Path(alias_file))

    def _load_aliases(self, path: Path):
        """Merge an alias file into the table. Later files win on conflicts."""
        if not path.exists():
            logger.warning(f"Alias file not found: {path}")
            return

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error loading alias file {path}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning(f"Alias file {path} is not a mapping, skipped")
            return

        for type_value, labels in data.items():
            try:
                document_type = DocumentType(type_value)
            except ValueError:
                logger.warning(f"Unknown document type {type_value!r} in {path}")
                continue
            if isinstance(labels, str):
                labels = [labels]
            for label in labels or []:
                self.aliases[str(label).casefold()] = document_type

        logger.debug(f"Loaded {len(self.aliases)} document type aliases from {path}")

    def detect(self, label: str) -> DocumentType:
        """
        Classify a raw document label.

        Args:
            label: Text after "СекцияДокумент="

        Returns:
            Matching DocumentType, DocumentType.OTHER if nothing matches
        """
        return self.aliases.get(label.casefold(), DocumentType.OTHER)

    def labels_for(self, document_type: DocumentType) -> List[str]:
        """List the case-folded labels known for a type."""
        return [label for label, value in self.aliases.items() if value is document_type]


@lru_cache(maxsize=1)
def default_detector() -> DocumentTypeDetector:
    """Shared detector built from the bundled alias table."""
    return DocumentTypeDetector()


def detect_document_type(label: str) -> DocumentType:
    """
    Convenience function to classify a label with the bundled aliases.

    Args:
        label: Raw document label

    Returns:
        DocumentType, never raises
    """
    return default_detector().detect(label)
