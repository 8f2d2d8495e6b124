# core/tests/test_authorization.py
from django.test import SimpleTestCase, TestCase
from django.urls import resolve, reverse
from rest_framework import status
from rest_framework.test import APITestCase

from core.authorization import Decision, Permission, requires
from core.storage import ClinicStorage
from factories.users import AdminUserFactory, UserFactory


class RequiresTest(TestCase):
    """Test the authorization capability"""

    def setUp(self):
        self.storage = ClinicStorage.from_models()
        self.user = UserFactory(email='user@example.com')
        self.admin = AdminUserFactory(email='admin@example.com')

    def test_no_claims_denied(self):
        for permission in Permission:
            self.assertIs(requires(None, permission, self.storage), Decision.DENY)

    def test_claims_without_email_denied(self):
        self.assertIs(requires({'exp': 1}, Permission.AUTHENTICATED, self.storage), Decision.DENY)

    def test_authenticated(self):
        decision = requires({'email': 'user@example.com'}, Permission.AUTHENTICATED, self.storage)

        self.assertIs(decision, Decision.ALLOW)
        self.assertTrue(decision)

    def test_subject_must_match_claim(self):
        claims = {'email': 'user@example.com'}

        self.assertIs(
            requires(claims, Permission.SUBJECT, self.storage, subject='user@example.com'),
            Decision.ALLOW
        )
        self.assertIs(
            requires(claims, Permission.SUBJECT, self.storage, subject='other@example.com'),
            Decision.DENY
        )
        self.assertIs(requires(claims, Permission.SUBJECT, self.storage), Decision.DENY)

    def test_admin_role(self):
        self.assertIs(
            requires({'email': 'admin@example.com'}, Permission.ADMIN, self.storage),
            Decision.ALLOW
        )
        self.assertIs(
            requires({'email': 'user@example.com'}, Permission.ADMIN, self.storage),
            Decision.DENY
        )

    def test_admin_unknown_user_denied(self):
        decision = requires({'email': 'ghost@example.com'}, Permission.ADMIN, self.storage)

        self.assertFalse(decision)


class LivenessViewTest(APITestCase):

    def test_liveness(self):
        response = self.client.get(reverse('liveness'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, 'Dr Faust Server is Running')


class RoutesTest(SimpleTestCase):
    """Test every app's routes are mounted at the root paths"""

    def test_paths(self):
        self.assertEqual(reverse('services'), '/services')
        self.assertEqual(reverse('available'), '/available')
        self.assertEqual(reverse('booking-collection'), '/booking')
        self.assertEqual(reverse('user-list'), '/user')
        self.assertEqual(reverse('user-make-admin', kwargs={'email': 'a@x.com'}), '/user/admin/a@x.com')
        self.assertEqual(reverse('admin-check', kwargs={'email': 'a@x.com'}), '/admin/a@x.com')
        self.assertEqual(reverse('doctor-delete', kwargs={'email': 'a@x.com'}), '/doctor/a@x.com')
        self.assertEqual(reverse('create-payment-intent'), '/create-payment-intent')

    def test_admin_route_wins_over_upsert(self):
        self.assertEqual(resolve('/user/admin/a@x.com').url_name, 'user-make-admin')
        self.assertEqual(resolve('/user/a@x.com').url_name, 'user-upsert')
