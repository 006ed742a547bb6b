# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
YAML exporter for loaded crossword puzzles.

Dumps the in-memory Crossword model (not the source JSON dialect) so a
loaded puzzle can be inspected or handed to other tools.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from models import Crossword, Word
from logging_config import get_logger


logger = get_logger(__name__)


class YAMLExportError(Exception):
    """Raised when YAML export fails."""
    pass


class YAMLExporter:
    """
    Exports crossword puzzles to YAML.

    Usage:
        exporter = YAMLExporter()
        yaml_str = exporter.export(crossword)
        exporter.save(crossword, 'output/puzzle.yaml')
    """

    def export(self, crossword: Crossword) -> str:
        """
        Export puzzle to YAML string.

        Args:
            crossword: The loaded puzzle

        Returns:
            YAML string representation of the puzzle
        """
        header = "# Crossword Puzzle\n"
        header += "# Loaded puzzle model with words in source order\n\n"

        try:
            yaml_content = yaml.safe_dump(
                self.to_dict(crossword),
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
                indent=2,
                width=80,
            )
        except yaml.YAMLError as e:
            raise YAMLExportError(f"Failed to serialize puzzle: {e}")

        return header + yaml_content

    def save(self, crossword: Crossword, path: str) -> str:
        """
        Save puzzle to YAML file.

        Args:
            crossword: The loaded puzzle
            path: Output file path

        Returns:
            Path to saved file
        """
        yaml_content = self.export(crossword)

        # Ensure directory exists
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            f.write(yaml_content)

        logger.info(f"Saved {path}")
        return str(path)

    def to_dict(self, crossword: Crossword) -> Dict[str, Any]:
        """Convert a Crossword into plain YAML-friendly data."""
        release_date = None
        if crossword.release_date is not None:
            release_date = crossword.release_date.strftime("%Y-%m-%d %H:%M:%S")

        return {
            'metadata': {
                'title': crossword.title,
                'author': crossword.author,
                'copyright': crossword.copyright,
                'description': crossword.description,
                'release_date': release_date,
            },
            'grid': {
                'width': crossword.width,
                'height': crossword.height,
            },
            'words': [self._word_to_dict(w) for w in crossword.words],
        }

    @staticmethod
    def _word_to_dict(word: Word) -> Dict[str, Any]:
        data = {
            'direction': word.direction.value,
            'number': word.number,
            'row': word.start_row,
            'col': word.start_column,
            'length': word.length,
            'answer': word.answer,
            'clue': word.hint,
        }
        attributes = [cell.attributes for cell in word.cells]
        if any(a is not None for a in attributes):
            data['attributes'] = attributes
        return data
