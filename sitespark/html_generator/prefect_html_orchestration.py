"""
Site Generation Orchestration
Loads a site content file, generates the HTML page and saves it

sitespark --config config/sitespark_config.yaml --content config/example_site.yaml --run
"""

import argparse
import logging
import sys
import time
from typing import Any, Dict, Optional

from prefect import flow, task, get_run_logger
from prefect.exceptions import MissingContextError

from ..config.config_manager import ConfigManager
from ..extract.content_extractor import SiteContentExtractor
from .generator import generate_site
from .models import SiteContent
from .renderers.html_renderer import HtmlRenderer
from .templates.template_factory import TemplateFactory
from ..utils.common import generate_timestamp
from ..utils.exceptions import PipelineError, SiteSparkError
from ..utils.logging_config import (
    get_logger,
    log_performance_metric,
    log_processing_step,
    setup_logging
)


def _get_logger() -> logging.Logger:
    """Prefect run logger inside a flow or task run, package logger otherwise"""
    try:
        return get_run_logger()
    except MissingContextError:
        return get_logger('orchestration')


@task(
    name="load_site_content",
    description="Load and normalise the site content file",
    retries=0
)
def load_site_content_task(config_path: str, content_path: str,
                           template: Optional[str] = None) -> SiteContent:
    """Load site content, applying configured defaults and an optional template override"""
    logger = _get_logger()
    logger.info(f"Loading site content from {content_path}")

    try:
        config = ConfigManager(config_path)
        site_content = SiteContentExtractor(config).extract(content_path)
    except SiteSparkError as e:
        logger.error(f"Site content loading failed: {e}")
        raise PipelineError(f"Site content loading failed: {e}", step="load", original_error=e)

    if template:
        site_content = SiteContent(
            niche_title=site_content.niche_title,
            products=site_content.products,
            primary_color=site_content.primary_color,
            secondary_color=site_content.secondary_color,
            include_branding=site_content.include_branding,
            template=template
        )

    logger.info(f"Loaded {len(site_content.products)} products for '{site_content.niche_title}'")
    return site_content


@task(
    name="generate_site_html",
    description="Render the site content into a complete HTML document"
)
def generate_site_html_task(site_content: SiteContent) -> Dict[str, Any]:
    """Generate the HTML document for the loaded content"""
    logger = _get_logger()
    task_start_time = time.time()

    html_content = generate_site(site_content)
    template_name = TemplateFactory.resolve_template_name(site_content.template)

    task_duration = time.time() - task_start_time
    log_performance_metric(logger, "html_generation", task_duration, len(site_content.products))

    return {
        'html_content': html_content,
        'template_name': template_name,
        'performance_metrics': {
            'html_generation_duration': task_duration
        }
    }


@task(
    name="save_site_html",
    description="Write the generated HTML document to the output directory",
    retries=1
)
def save_site_html_task(config_path: str, site_content: SiteContent,
                        generation_results: Dict[str, Any]) -> Dict[str, Any]:
    """Save the generated page and summarise the output"""
    logger = _get_logger()

    try:
        config = ConfigManager(config_path)
        html_renderer = HtmlRenderer(config.get_output_config())

        template_name = generation_results['template_name']
        file_path = html_renderer.save_html(
            generation_results['html_content'],
            site_content.niche_title,
            template_name
        )
    except (SiteSparkError, KeyError) as e:
        logger.error(f"Saving generated site failed: {e}")
        raise PipelineError(f"Saving generated site failed: {e}", step="save", original_error=e)

    logger.info(f"Saved generated site to {file_path}")
    return html_renderer.get_output_summary({template_name: file_path})


@flow(
    name="site-generation",
    description="Generate a niche affiliate site from a content file",
    version="1.0.0",
    timeout_seconds=300
)
def site_generation_flow(config_path: str, content_path: str,
                         template: Optional[str] = None) -> Dict[str, Any]:
    """Load, generate and save one site"""
    logger = _get_logger()
    logger.info("Starting site generation")
    flow_start_time = time.time()

    try:
        log_processing_step(logger, "load site content", content_path)
        site_content = load_site_content_task(config_path, content_path, template)
        log_processing_step(logger, "generate html", site_content.template)
        generation_results = generate_site_html_task(site_content)
        log_processing_step(logger, "save html")
        output_summary = save_site_html_task(config_path, site_content, generation_results)

        summary = {
            'pipeline_status': 'SUCCESS',
            'execution_timestamp': generate_timestamp(),
            'total_execution_time_seconds': time.time() - flow_start_time,
            'niche_title': site_content.niche_title,
            'template_name': generation_results['template_name'],
            'products_rendered': len(site_content.products),
            'output_summary': output_summary
        }

        logger.info("Site generation completed successfully")
        return summary

    except SiteSparkError as e:
        logger.error(f"Site generation failed: {e}")
        return {
            'pipeline_status': 'FAILED',
            'error': str(e),
            'execution_timestamp': generate_timestamp(),
            'total_execution_time_seconds': time.time() - flow_start_time,
            'products_rendered': 0
        }


def main(argv=None) -> int:
    """CLI for site generation"""
    parser = argparse.ArgumentParser(description="SiteSpark niche site generation")
    parser.add_argument("--config", required=True, help="Path to configuration file")
    parser.add_argument("--content", required=True, help="Path to site content file (.json/.yaml)")
    parser.add_argument("--template", choices=TemplateFactory.get_available_templates(),
                        help="Override the template named in the content file")
    parser.add_argument("--run", action="store_true", help="Run site generation")

    args = parser.parse_args(argv)

    if not args.run:
        parser.print_help()
        return 0

    try:
        setup_logging(ConfigManager(args.config).get_logging_config())
    except SiteSparkError as e:
        print(f"Failed: {e}")
        return 1

    result = site_generation_flow(args.config, args.content, args.template)

    if result['pipeline_status'] == 'SUCCESS':
        print(f"Generated '{result['niche_title']}' with the {result['template_name']} template")
        print(f"Products rendered: {result['products_rendered']}")
        print(f"Output: {', '.join(result['output_summary']['files'].values())}")
        print(f"Duration: {result['total_execution_time_seconds']:.2f}s")
        return 0

    print(f"Failed: {result.get('error', 'Unknown error')}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
