from django.test import SimpleTestCase, override_settings

from drf_remember.checks import check_record_model, check_signing_support


class RecordModelCheckTests(SimpleTestCase):
    def test_configured_model_passes(self):
        self.assertEqual(check_record_model(None), [])

    @override_settings(DRF_REMEMBER={"RECORD_MODEL": "tests.PlainRecord"})
    def test_missing_token_field(self):
        errors = check_record_model(None)
        self.assertEqual([e.id for e in errors], ["drf_remember.E001"])

    @override_settings(DRF_REMEMBER={"RECORD_MODEL": "tests.Nothing"})
    def test_unknown_model(self):
        errors = check_record_model(None)
        self.assertEqual([e.id for e in errors], ["drf_remember.E003"])


class SigningSupportCheckTests(SimpleTestCase):
    def test_default_jar_passes(self):
        self.assertEqual(check_signing_support(None), [])

    @override_settings(
        DRF_REMEMBER={
            "RECORD_MODEL": "tests.Member",
            "SIGN_COOKIE": True,
            "COOKIE_JAR_CLASS": "tests.helpers.ReadOnlyJar",
        }
    )
    def test_signing_without_support(self):
        errors = check_signing_support(None)
        self.assertEqual([e.id for e in errors], ["drf_remember.E002"])
