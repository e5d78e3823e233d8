import functools
from typing import Any, Callable, List, MutableMapping, Optional

import click

from labelkeeper._cogs.helpers import manifests, versions
from labelkeeper._cogs.structs import bodies, finalizers
from labelkeeper._core import loggers, retention, tracking


class LogFormatParamType(click.Choice):

    def __init__(self) -> None:
        super().__init__(choices=[v.name.lower() for v in loggers.LogFormat])

    def convert(self, value: Any, param: Any, ctx: Any) -> loggers.LogFormat:
        if isinstance(value, loggers.LogFormat):
            return value
        name: str = super().convert(value, param, ctx)
        return loggers.LogFormat[name.upper()]


class OutputFormatParamType(click.Choice):

    def __init__(self) -> None:
        super().__init__(choices=[v.value for v in manifests.OutputFormat])

    def convert(self, value: Any, param: Any, ctx: Any) -> manifests.OutputFormat:
        if isinstance(value, manifests.OutputFormat):
            return value
        name: str = super().convert(value, param, ctx)
        return manifests.OutputFormat(name)


def logging_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """ A decorator to configure logging in all commands the same way."""
    @click.option('-v', '--verbose', is_flag=True)
    @click.option('-d', '--debug', is_flag=True)
    @click.option('-q', '--quiet', is_flag=True)
    @click.option('--log-format', type=LogFormatParamType(), default='full')
    @click.option('--log-refkey', type=str)
    @click.option('--log-prefix/--no-log-prefix', default=None)
    @functools.wraps(fn)  # to preserve other opts/args
    def wrapper(verbose: bool, quiet: bool, debug: bool,
                log_format: loggers.LogFormat = loggers.LogFormat.FULL,
                log_prefix: Optional[bool] = False,
                log_refkey: Optional[str] = None,
                *args: Any, **kwargs: Any) -> Any:
        loggers.configure(debug=debug, verbose=verbose, quiet=quiet,
                          log_format=log_format, log_refkey=log_refkey, log_prefix=log_prefix)
        return fn(*args, **kwargs)

    return wrapper


def output_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """ A decorator to choose the output format in all commands the same way."""
    option = click.option('-o', '--output', 'output_format',
                          type=OutputFormatParamType(), default='yaml')
    return option(fn)


def _load(path: str) -> MutableMapping[str, Any]:
    try:
        return manifests.load(path)
    except manifests.ManifestError as e:
        raise click.ClickException(str(e)) from e


@click.version_option(version=versions.version or 'unknown', prog_name='labelkeeper')
@click.group(name='labelkeeper', context_settings=dict(
    auto_envvar_prefix='LABELKEEPER',
))
def main() -> None:
    pass


@main.command()
@logging_options
@output_options
@click.option('--record/--no-record', default=False,
              help="Stamp the desired keys as managed before retaining the foreign ones.")
@click.argument('desired_path', metavar='DESIRED')
@click.argument('observed_path', metavar='OBSERVED')
def retain(
        desired_path: str,
        observed_path: str,
        record: bool,
        output_format: manifests.OutputFormat,
) -> None:
    """ Retain the observed object's foreign metadata in the desired object. """
    if desired_path == '-' and observed_path == '-':
        raise click.UsageError("Only one of the manifests can be read from stdin.")
    desired = _load(desired_path)
    observed = _load(observed_path)
    logger = loggers.ObjectLogger(body=desired)

    # Only the rendered metadata is ours; the retained one must stay foreign.
    if record:
        tracking.record_managed_metadata(desired)
    retention.retain_metadata(desired, observed, logger=logger)
    click.echo(manifests.dump(desired, output_format), nl=False)


@main.command()
@logging_options
@output_options
@click.argument('path', metavar='MANIFEST')
def record(
        path: str,
        output_format: manifests.OutputFormat,
) -> None:
    """ Stamp the current labels & annotations as managed. """
    body = _load(path)
    tracking.record_managed_metadata(body)
    click.echo(manifests.dump(body, output_format), nl=False)


@main.command()
@logging_options
@click.option('--annotations', 'show_annotations', is_flag=True,
              help="Show the managed annotations instead of the managed labels.")
@click.argument('path', metavar='MANIFEST')
def managed(
        path: str,
        show_annotations: bool,
) -> None:
    """ Show the keys managed by the control plane, one per line. """
    body = _load(path)
    if show_annotations:
        keys = tracking.get_managed_annotations(body)
    else:
        keys = tracking.get_managed_labels(body)
    for key in sorted(keys):
        click.echo(key)


@main.command(name='merge-finalizers')
@logging_options
@click.argument('paths', metavar='MANIFEST', nargs=-1, required=True)
def merge_finalizers(
        paths: List[str],
) -> None:
    """ Merge the finalizers of all manifests in order, one per line. """
    merged: List[str] = []
    for path in paths:
        body = bodies.Body(_load(path))
        merged = finalizers.dedupe_and_merge_finalizers(merged, body.meta.finalizers)
    for finalizer in merged:
        click.echo(finalizer)
