"""
Rendering pipeline hook.

Resolves the annotation locator for a document, awaits the cached annotation
text, merges it, and always falls back to the original content.
"""

from typing import Callable

from interlinear._logging import log_error
from interlinear.cache import AnnotationCache
from interlinear.config import InterlinearSettings, get_settings
from interlinear.core.classifier import EligibilityClassifier, gloss_rule
from interlinear.core.markup import GlossMarkup
from interlinear.core.merger import merge_annotations
from interlinear.core.paths import resolve_annotation_url
from interlinear.exceptions import MergeError, ResolutionError
from interlinear.fetch.base import BaseFetcher, build_fetch_options
from interlinear.fetch.http import HttpFetcher


class AnnotationHook:
    """
    "Before parse" hook that adds interlinear glosses to raw document text.

    Example:
        hook = AnnotationHook(settings=configure(base_path="https://docs.example.com/"))

        async def before_each(content, route):
            return await hook(content, route.file)
    """

    def __init__(
        self,
        settings: InterlinearSettings | None = None,
        cache: AnnotationCache | None = None,
        fetcher: BaseFetcher | None = None,
        classifier: EligibilityClassifier | None = None,
    ):
        """
        Initialize the hook.

        Args:
            settings: Settings instance to use
            cache: Annotation cache (built from ``fetcher`` and settings if None)
            fetcher: Fetcher for a hook-owned cache (HttpFetcher if None)
            classifier: Eligibility rules (default rules with the configured gloss tag)
        """
        self._settings = settings or get_settings()

        if cache is None:
            options = build_fetch_options(
                self._settings.fetch_options,
                self._settings.request_headers,
                default_cache=self._settings.cache_mode,
            )
            cache = AnnotationCache(fetcher or HttpFetcher(self._settings), options)
        self.cache = cache

        self.markup = GlossMarkup(
            wrap_tag=self._settings.gloss_tag,
            text_tag=self._settings.gloss_text_tag,
            line_break_tag=self._settings.line_break_tag,
        )
        self.classifier = (classifier or EligibilityClassifier()).replacing(
            gloss_rule(self._settings.gloss_tag)
        )

    def resolve(self, file: str | None) -> str | None:
        """Annotation locator for a document, or None if it is not annotatable."""
        try:
            return resolve_annotation_url(
                file,
                self._settings.base_path,
                suffix=self._settings.annotation_suffix,
                extension=self._settings.source_extension,
            )
        except ResolutionError:
            return None

    async def before_each(
        self,
        content: str,
        file: str | None,
        is_current: Callable[[], bool] | None = None,
    ) -> str:
        """
        Return the content with glosses added, or the original content.

        Args:
            content: Raw primary document text
            file: The document's locator
            is_current: Checked once the fetch settles; if it returns False the
                document was navigated away from and the content is returned as-is

        Returns:
            Merged content, or ``content`` unchanged on any failure
        """
        try:
            url = self.resolve(file)
            if url is None:
                return content

            annotation_text = await self.cache.load(url)
            if not annotation_text:
                return content

            if is_current is not None and not is_current():
                return content

            return self.merge(content, annotation_text, file)
        except MergeError as e:
            log_error(str(e), exc_info=True)
            return content
        except Exception as e:
            log_error(
                "Failed to annotate document",
                exc_info=True,
                document=file,
                error=repr(e),
            )
            return content

    def merge(self, content: str, annotation_text: str, file: str | None = None) -> str:
        """
        Merge annotation text into content with this hook's rules and markup.

        Raises:
            MergeError: If segmenting, classifying or wrapping fails
        """
        try:
            result = merge_annotations(
                content,
                annotation_text,
                classifier=self.classifier,
                markup=self.markup,
                document_id=file,
            )
        except Exception as e:
            raise MergeError(
                f"Failed to merge annotation content: {e}", document_id=file
            ) from e
        return result.content

    __call__ = before_each
