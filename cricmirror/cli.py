"""
cli.py
=======
Command line entry point for extracting and saving page snapshots.
"""

import argparse
import json
import os
import time

import logfire
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

from cricmirror.config import MirrorSettings
from cricmirror.core.extraction.extractor import SnapshotExtractor
from cricmirror.live import fetch_live_matches, fetch_live_news
from cricmirror.models.snapshot import FullSnapshot, Snapshot
from cricmirror.outputs import save_snapshot
from cricmirror.utils.logging import setup_local_logging

DEFAULT_PAGES = [
    '/',
    '/cricket-news',
    '/cricket-match/live-scores',
    '/cricket-series',
    '/cricket-videos',
]


class SnapshotPipeline:
    """Extracts a list of pages and saves each snapshot to disk.

    Attributes:
        custom_theme: Rich theme for console output
        console: Rich console instance for formatted output
        settings: Origin, timeout, user agent and output directory
        extractor: Extraction engine shared by every page in the run

    """

    def __init__(self, settings: MirrorSettings, console: Console | None = None):
        """Initialize the pipeline.

        Args:
            settings: Runtime settings
            console: Rich console. Defaults to a themed console.

        """
        self.custom_theme = Theme(
            {
                'info': 'dim cyan',
                'warning': 'magenta',
                'danger': 'bold red',
                'success': 'bold green',
                'step': 'bold blue',
            }
        )
        self.console = console or Console(theme=self.custom_theme)
        self.settings = settings
        self.extractor = SnapshotExtractor(settings=settings)

    def process_page(self, page_path: str, fast_mode: bool = False) -> bool:
        """Extract one page and save its snapshot.

        Args:
            page_path: Path on the origin, or an absolute URL
            fast_mode: Only locate news cards and matches

        Returns:
            True if the snapshot was extracted and saved, False otherwise.

        """
        mode = 'fast' if fast_mode else 'full'
        self.console.print(Panel(f'[bold]Extracting:[/bold] [underline]{page_path}[/underline] ({mode})'))

        with self.console.status('[step]Fetching and extracting...[/step]', spinner='dots'):
            snapshot = self.extractor.extract(page_path, fast_mode=fast_mode)

        if snapshot is None:
            self.console.print(f'[danger]✗ Failed to extract {page_path}[/danger]')
            return False

        filepath = save_snapshot(snapshot, page_path, self.settings.output_dir)
        self.console.print(f'[success]✓ Saved to: {filepath}[/success]')
        self._print_counts(snapshot)
        return True

    def process_pages(self, pages: list[str], fast_mode: bool = False, delay: float = 2.0):
        """Extract several pages, pausing between requests.

        Args:
            pages: Paths or absolute URLs to extract
            fast_mode: Only locate news cards and matches
            delay: Seconds to wait between pages

        """
        results: dict[str, list[str]] = {'successful': [], 'failed': []}

        with logfire.span('process_pages', total_pages=len(pages), fast_mode=fast_mode):
            for idx, page in enumerate(pages, 1):
                self.console.print(f'\n[bold blue]Page {idx}/{len(pages)}[/bold blue]')
                try:
                    if self.process_page(page, fast_mode=fast_mode):
                        results['successful'].append(page)
                    else:
                        results['failed'].append(page)
                except OSError as e:
                    logfire.error('Error saving snapshot', page=page, error=str(e))
                    self.console.print(f'[danger]Error processing {page}: {e}[/danger]')
                    results['failed'].append(page)

                if delay > 0 and idx < len(pages):
                    time.sleep(delay)

            logfire.info(
                'Processing complete',
                total=len(pages),
                successful=len(results['successful']),
                failed=len(results['failed']),
            )

        self._print_summary(results)

    def show_live(self, kind: str):
        """Print live news cards or matches as JSON.

        Args:
            kind: 'news' or 'matches'

        """
        if kind == 'news':
            items = fetch_live_news(extractor=self.extractor)
        else:
            items = fetch_live_matches(extractor=self.extractor)

        self.console.print(f'[info]{len(items)} {kind} item(s)[/info]')
        self.console.print_json(json.dumps(items, ensure_ascii=False))

    def _print_counts(self, snapshot: Snapshot):
        table = Table(show_header=False)
        table.add_column('What', style='cyan')
        table.add_column('Count', style='green', justify='right')

        if isinstance(snapshot, FullSnapshot):
            rows = [
                ('Elements', len(snapshot.elements)),
                ('CSS Classes', len(snapshot.css.all_classes)),
                ('CSS IDs', len(snapshot.css.all_ids)),
                ('Inline Styles', len(snapshot.css.inline)),
                ('Style Tags', len(snapshot.css.style_tags)),
                ('External CSS', len(snapshot.css.external)),
                ('JavaScript Files', len(snapshot.javascript.external)),
                ('Inline Scripts', len(snapshot.javascript.inline)),
                ('Variables', len(snapshot.javascript.variables)),
                ('Functions', len(snapshot.javascript.functions)),
                ('Images', len(snapshot.images)),
                ('Links', len(snapshot.links)),
                ('Text Content', len(snapshot.text_content)),
            ]
        else:
            rows = []

        rows += [('News Cards', len(snapshot.news_cards)), ('Matches', len(snapshot.matches_list))]
        for label, count in rows:
            table.add_row(label, str(count))
        self.console.print(table)

    def _print_summary(self, results: dict):
        self.console.print()
        table = Table(title='Extraction Summary', show_header=False)
        table.add_row('[green]Successful[/green]', str(len(results['successful'])))
        table.add_row('[red]Failed[/red]', str(len(results['failed'])))
        self.console.print(table)

        if results['failed']:
            self.console.print('\n[bold red]Failed pages:[/bold red]')
            for page in results['failed']:
                self.console.print(f'  - {page}', style='red')

    def close(self):
        """Close the extractor's fetcher."""
        self.extractor.close()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the cricmirror command."""
    parser = argparse.ArgumentParser(description='Extract structured snapshots of live cricket pages')
    parser.add_argument(
        '--path', action='append', dest='paths', help='Page path or URL to extract (repeatable, default: main pages)'
    )
    parser.add_argument('--fast', action='store_true', help='Fast mode: only news cards and matches')
    parser.add_argument('--output', type=str, help='Directory to save snapshots to (default: extracted)')
    parser.add_argument('--delay', type=float, default=2.0, help='Seconds to wait between pages (default: 2.0)')
    parser.add_argument('--log-level', type=str, default='INFO', help='Level for the local log file (default: INFO)')

    live = parser.add_mutually_exclusive_group()
    live.add_argument('--news', action='store_true', help='Print live news cards and exit')
    live.add_argument('--matches', action='store_true', help='Print live matches and exit')
    return parser


def main(argv: list[str] | None = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    settings = MirrorSettings.from_env()
    if args.output:
        settings = settings.model_copy(update={'output_dir': args.output})

    logfire_token = os.getenv('LOGFIRE_TOKEN')
    if logfire_token:
        logfire.configure(token=logfire_token, service_name='cricmirror')

    log_file = setup_local_logging(args.log_level)

    pipeline = SnapshotPipeline(settings)
    pipeline.console.print(f'[info]Logging to {log_file}[/info]')

    try:
        if args.news or args.matches:
            pipeline.show_live('news' if args.news else 'matches')
            return

        pages = args.paths or DEFAULT_PAGES
        pipeline.process_pages(pages, fast_mode=args.fast, delay=args.delay)
    finally:
        pipeline.close()


if __name__ == '__main__':
    main()
