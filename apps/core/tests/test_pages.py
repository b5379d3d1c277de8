"""Smoke tests for the public pages and template helpers."""

from __future__ import annotations

from datetime import date

from django.template import Context, Template
from django.test import TestCase
from django.urls import reverse


class PublicPagesTests(TestCase):
    def test_static_pages_render(self) -> None:
        for name in ("home", "about", "contact"):
            with self.subTest(page=name):
                response = self.client.get(reverse(name))
                self.assertEqual(response.status_code, 200)
                self.assertFalse(response.context["is_authenticated"])

    def test_unknown_page_returns_404(self) -> None:
        response = self.client.get("/no-such-page")
        self.assertEqual(response.status_code, 404)


class TemplateHelpersTests(TestCase):
    """The filters and tags are registered as template builtins."""

    def _render(self, source: str, **context) -> str:  # type: ignore
        return Template(source).render(Context(context)).strip()

    def test_human_date(self) -> None:
        self.assertEqual(self._render("{{ day|human_date }}", day=date(2050, 3, 7)), "2050-03-07")
        self.assertEqual(self._render("{{ day|human_date }}", day=None), "")

    def test_format_date(self) -> None:
        self.assertEqual(self._render("{{ day|format_date:'%m' }}", day=date(2050, 3, 7)), "03")

    def test_iterate_counts_from_zero(self) -> None:
        self.assertEqual(self._render("{% for i in 3|iterate %}{{ i }}{% endfor %}"), "012")

    def test_get_item_and_calendar_day(self) -> None:
        rendered = self._render(
            "{% calendar_day 2050 3 7 as day %}{{ day }}={{ mapping|get_item:day }}",
            mapping={"2050-03-07": 42},
        )
        self.assertEqual(rendered, "2050-03-07=42")
