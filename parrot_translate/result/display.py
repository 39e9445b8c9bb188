"""
Expand a TranslateFormatResult into ordered, titled display sections.

The output is rebuilt from scratch on every call and depends on nothing
but the input, so equal inputs always yield equal section lists.
"""

from typing import Optional

from parrot_translate.models import (
    DisplayItem,
    DisplaySection,
    SectionType,
    TranslateFormatResult,
)
from parrot_translate.utils import one_line

DETAILS_SECTION_TITLE = "Details"
WEB_VALUE_SEPARATOR = "；"
FORMS_SEPARATOR = "   "


def _translation_sections(
    result: TranslateFormatResult, compact: bool
) -> list[DisplaySection]:
    show_multiple = not result.has_details and not compact
    word_info = result.query_word_info
    sections = []
    for i, translation in enumerate(result.translations):
        text = one_line(translation.text)
        item = DisplayItem(
            key=text + str(i),
            title=text,
            tooltip="" if show_multiple else translation.provider.title,
            copy_text=text,
            phonetic=word_info.phonetic,
            exam_types=word_info.exam_types,
        )
        if show_multiple:
            sections.append(
                DisplaySection(kind=translation.provider, title=translation.provider.title, items=[item])
            )
        else:
            sections.append(
                DisplaySection(
                    kind=SectionType.TRANSLATION,
                    title=SectionType.TRANSLATION.value,
                    items=[item],
                )
            )
            break
    return sections


def _detail_rows(result: TranslateFormatResult) -> list[tuple[SectionType, DisplayItem]]:
    rows = []
    for i, explanation in enumerate(result.explanations or []):
        rows.append(
            (
                SectionType.EXPLANATIONS,
                DisplayItem(
                    key=explanation + str(i),
                    title=explanation,
                    tooltip=SectionType.EXPLANATIONS.value,
                    copy_text=explanation,
                ),
            )
        )

    # [ 复数 goods   比较级 better   最高级 best ]
    forms_text = FORMS_SEPARATOR.join(f"{form.name} {form.value}" for form in result.forms or [])
    if forms_text:
        rows.append(
            (
                SectionType.FORMS,
                DisplayItem(
                    key=forms_text,
                    title="",
                    tooltip=SectionType.FORMS.value,
                    subtitle=f"[ {forms_text} ]",
                    copy_text=forms_text,
                ),
            )
        )

    if result.web_translation is not None:
        key = result.web_translation.key
        value = WEB_VALUE_SEPARATOR.join(result.web_translation.value)
        rows.append(
            (
                SectionType.WEB_TRANSLATION,
                DisplayItem(
                    key=key,
                    title=key,
                    tooltip=SectionType.WEB_TRANSLATION.value,
                    subtitle=value,
                    copy_text=f"{key} {value}",
                ),
            )
        )

    for i, phrase in enumerate(result.web_phrases or []):
        value = WEB_VALUE_SEPARATOR.join(phrase.value)
        rows.append(
            (
                SectionType.WEB_PHRASE,
                DisplayItem(
                    key=phrase.key + str(i),
                    title=phrase.key,
                    tooltip=SectionType.WEB_PHRASE.value,
                    subtitle=value,
                    copy_text=f"{phrase.key} {value}",
                ),
            )
        )
    return rows


def build_display_sections(
    result: TranslateFormatResult, compact: bool = False
) -> list[DisplaySection]:
    """
    Build the display sections for one lookup.

    Without dictionary details every provider's line gets its own section
    titled by the provider, or just the primary line under "Translation"
    when ``compact``. With details the translations collapse into a single
    "Translation" row followed by explanations, word forms, the web
    translation and web phrases. Only the first detail section carries
    the "Details" title.
    """
    sections = _translation_sections(result, compact)

    title: Optional[str] = DETAILS_SECTION_TITLE
    for kind, item in _detail_rows(result):
        sections.append(DisplaySection(kind=kind, title=title, items=[item]))
        title = None
    return sections
