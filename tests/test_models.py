from django.test import TestCase

from drf_remember.models import get_record_model

from tests.models import Member


class PersistenceTokenMixinTests(TestCase):
    def test_record_model_resolves_through_swapper(self):
        self.assertIs(get_record_model(), Member)

    def test_token_generated_on_create(self):
        member = Member.objects.create(username="carol")
        self.assertEqual(len(member.persistence_token), 128)

    def test_reset_persistence_token(self):
        member = Member.objects.create(username="carol")
        old_token = member.persistence_token

        new_token = member.reset_persistence_token()

        member.refresh_from_db()
        self.assertNotEqual(new_token, old_token)
        self.assertEqual(member.persistence_token, new_token)

    def test_reset_without_saving(self):
        member = Member.objects.create(username="carol")
        old_token = member.persistence_token

        member.reset_persistence_token(save=False)

        member.refresh_from_db()
        self.assertEqual(member.persistence_token, old_token)
