"""
HTML Renderer
Handles saving generated pages and output management
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Dict, Any

from ...utils.common import slugify
from ...utils.exceptions import HtmlGenerationError
from ...utils.logging_config import get_logger


class HtmlRenderer:
    """
    Handles HTML file output
    Single responsibility: writing generated documents to disk
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialise HTML renderer

        Args:
            config: Output configuration (the 'output' section of the config file)
        """
        self.config = config or {}
        self.logger = get_logger('html_renderer')

    def save_html(self, html_content: str, niche_title: str, template_name: str) -> str:
        """
        Save HTML content to file

        Args:
            html_content: Complete HTML document
            niche_title: Site title, slugified into the filename
            template_name: Template name used

        Returns:
            Path to saved HTML file
        """
        try:
            filename = self._generate_filename(niche_title, template_name)

            output_dir = self._get_output_directory()
            output_dir.mkdir(parents=True, exist_ok=True)

            file_path = output_dir / filename
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(html_content)

            self.logger.info(f"Saved generated site: {file_path}")
            self.logger.info(f"File size: {len(html_content):,} characters")

            return str(file_path)

        except (OSError, KeyError, ValueError) as e:
            raise HtmlGenerationError(f"Failed to save HTML file for '{niche_title}': {e}",
                                      template_name=template_name)

    def _generate_filename(self, niche_title: str, template_name: str) -> str:
        """Generate output filename from the configured naming pattern"""
        naming_pattern = self.config.get('file_naming', '{site_slug}_{template_name}.html')

        filename = naming_pattern.format(
            site_slug=slugify(niche_title),
            template_name=template_name
        )

        if self.config.get('include_timestamp', False):
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            base, ext = os.path.splitext(filename)
            filename = f"{base}_{timestamp}{ext}"

        return filename

    def _get_output_directory(self) -> Path:
        """Configured output directory, relative paths resolved against the working directory"""
        base_dir = Path(self.config.get('output_directory', 'generated_sites'))
        if not base_dir.is_absolute():
            base_dir = Path.cwd() / base_dir
        return base_dir

    def get_output_summary(self, saved_files: Dict[str, str]) -> Dict[str, Any]:
        """
        Generate summary of output files

        Args:
            saved_files: Dictionary of template_name -> file_path

        Returns:
            Summary dictionary
        """
        total_size = 0

        for file_path in saved_files.values():
            path = Path(file_path)
            if path.exists():
                total_size += path.stat().st_size

        return {
            'files_generated': len(saved_files),
            'total_size_bytes': total_size,
            'total_size_kb': round(total_size / 1024, 2),
            'output_directory': str(self._get_output_directory()),
            'files': saved_files
        }
