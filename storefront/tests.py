from django.test import Client, TestCase, override_settings
from django.urls import reverse

from storefront.models import Page
from storefront.query import ContentQuery


class StorefrontFrontTests(TestCase):
    def setUp(self):
        self.about = Page.objects.create(title="About us", slug="about", body="Who we are")
        self.terms = Page.objects.create(title="Terms", slug="terms", body="Small print")
        self.draft = Page.objects.create(title="Draft", slug="draft", is_published=False)
        self.c = Client()

    def test_front_lists_published_pages(self):
        resp = self.c.get(reverse("storefront:front"))
        self.assertEqual(resp.status_code, 200)
        titles = [p.title for p in resp.context["page_obj"]]
        self.assertIn("About us", titles)
        self.assertNotIn("Draft", titles)

    def test_search(self):
        resp = self.c.get(reverse("storefront:front"), {"s": "term"})
        self.assertEqual([p.title for p in resp.context["page_obj"]], ["Terms"])
        self.assertEqual(resp.context["search"], "term")

    def test_page_id_query(self):
        resp = self.c.get(reverse("storefront:front"), {"page_id": self.about.pk})
        self.assertEqual(resp.context["page"], self.about)

    def test_pagename_query(self):
        resp = self.c.get(reverse("storefront:front"), {"pagename": "terms"})
        self.assertEqual(resp.context["page"], self.terms)

    def test_unknown_page_id_is_404(self):
        resp = self.c.get(reverse("storefront:front"), {"page_id": 999999})
        self.assertEqual(resp.status_code, 404)

    def test_draft_page_detail_is_404(self):
        resp = self.c.get(reverse("storefront:page_detail", args=["draft"]))
        self.assertEqual(resp.status_code, 404)

    def test_unregistered_query_vars_ignored(self):
        resp = self.c.get(reverse("storefront:front"), {"utm_source": "mail"})
        self.assertEqual(resp.wsgi_request.content_query.query_vars, {})
        self.assertIn("page_obj", resp.context)

    def test_static_front_page(self):
        with override_settings(SITE_SHOW_ON_FRONT="page", SITE_PAGE_ON_FRONT=self.about.pk):
            resp = self.c.get(reverse("storefront:front"))
        self.assertEqual(resp.context["page"], self.about)
        self.assertTrue(resp.context["is_front_page"])


class ContentQueryTests(TestCase):
    def test_set_none_removes_var(self):
        q = ContentQuery({"s": "hat", "paged": "2"})
        q.set("paged", None)
        self.assertEqual(q.query_vars, {"s": "hat"})

    def test_flags_not_refreshed_until_parsed(self):
        q = ContentQuery({"s": "hat"})
        q.unset("s")
        self.assertTrue(q.is_search)
        q.parse_query(q.query_vars)
        self.assertTrue(q.is_home)

    def test_empty_values_dropped(self):
        q = ContentQuery({"page_id": "", "s": None})
        self.assertEqual(q.query_vars, {})
        self.assertTrue(q.is_home)

    def test_invalid_page_id(self):
        q = ContentQuery({"page_id": "abc"})
        self.assertTrue(q.is_page)
        self.assertIsNone(q.page_id())
        self.assertIsNone(q.get_page())
