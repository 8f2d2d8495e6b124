# users/tests/test_views.py
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from bookings.models import Booking
from factories.catalog import ServiceFactory
from users.models import User
from users.tokens import token_generator
from factories.users import AdminUserFactory, UserFactory


def auth_header(email):
    return {'HTTP_AUTHORIZATION': f'Bearer {token_generator.make_token(email)}'}


class UserUpsertViewTest(APITestCase):
    """Test PUT /user/<email>"""

    def test_upsert_returns_profile_and_token(self):
        url = reverse('user-upsert', kwargs={'email': 'pat@example.com'})

        response = self.client.put(url, {'name': 'Pat'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['result']['email'], 'pat@example.com')
        self.assertEqual(response.data['result']['name'], 'Pat')
        claims = token_generator.decode_token(response.data['token'])
        self.assertEqual(claims['email'], 'pat@example.com')

    def test_issued_token_authenticates(self):
        url = reverse('user-upsert', kwargs={'email': 'pat@example.com'})
        token = self.client.put(url, {}, format='json').data['token']

        response = self.client.get(reverse('user-list'), HTTP_AUTHORIZATION=f'Bearer {token}')

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_upsert_twice_keeps_one_user(self):
        url = reverse('user-upsert', kwargs={'email': 'pat@example.com'})

        self.client.put(url, {'name': 'Pat'}, format='json')
        self.client.put(url, {'name': 'Patricia'}, format='json')

        self.assertEqual(User.objects.count(), 1)
        self.assertEqual(User.objects.get().name, 'Patricia')

    def test_email_kept_as_given(self):
        """Test the token claim matches the email the client used, case included"""
        url = reverse('user-upsert', kwargs={'email': 'Pat@Example.COM'})

        response = self.client.put(url, {}, format='json')

        self.assertEqual(response.data['result']['email'], 'Pat@Example.COM')
        claims = token_generator.decode_token(response.data['token'])
        self.assertEqual(claims['email'], 'Pat@Example.COM')

    def test_mixed_case_user_reads_own_bookings(self):
        ServiceFactory(name='Teeth Cleaning', slots=['9:00 AM'])
        token = self.client.put(
            reverse('user-upsert', kwargs={'email': 'Pat@Example.COM'}), {}, format='json'
        ).data['token']
        self.client.post(reverse('booking-collection'), {
            'treatmentName': 'Teeth Cleaning',
            'patientEmail': 'Pat@Example.COM',
            'date': 'Jan 5, 2024',
            'timeSlot': '9:00 AM',
        }, format='json')

        response = self.client.get(
            reverse('booking-collection'), {'patient': 'Pat@Example.COM'},
            HTTP_AUTHORIZATION=f'Bearer {token}'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(Booking.objects.get().patient_email, 'Pat@Example.COM')

    @override_settings(ACCESS_TOKEN={'SECRET': '', 'ALGORITHM': 'HS256', 'LIFETIME_SECONDS': 3600})
    def test_token_secret_missing(self):
        url = reverse('user-upsert', kwargs={'email': 'pat@example.com'})

        response = self.client.put(url, {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)

    def test_invalid_email(self):
        url = reverse('user-upsert', kwargs={'email': 'not-an-email'})

        response = self.client.put(url, {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class UserListViewTest(APITestCase):

    def setUp(self):
        UserFactory(email='a@example.com')
        UserFactory(email='b@example.com')

    def test_list_users(self):
        response = self.client.get(reverse('user-list'), **auth_header('a@example.com'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual({u['email'] for u in response.data}, {'a@example.com', 'b@example.com'})

    def test_list_users_without_token(self):
        response = self.client.get(reverse('user-list'))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response['WWW-Authenticate'], 'Bearer')

    def test_list_users_invalid_token(self):
        response = self.client.get(reverse('user-list'), HTTP_AUTHORIZATION='Bearer broken')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    @override_settings(ACCESS_TOKEN={'SECRET': '', 'ALGORITHM': 'HS256', 'LIFETIME_SECONDS': 3600})
    def test_list_users_token_secret_missing(self):
        """Test unverifiable tokens answer 503 instead of crashing"""
        response = self.client.get(reverse('user-list'), HTTP_AUTHORIZATION='Bearer abc.def.ghi')

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)


class AdminCheckViewTest(APITestCase):

    def test_admin_true(self):
        AdminUserFactory(email='boss@example.com')

        response = self.client.get(reverse('admin-check', kwargs={'email': 'boss@example.com'}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'admin': True})

    def test_admin_false_for_regular_and_unknown(self):
        UserFactory(email='pat@example.com')

        for email in ('pat@example.com', 'ghost@example.com'):
            response = self.client.get(reverse('admin-check', kwargs={'email': email}))
            self.assertEqual(response.data, {'admin': False})


class MakeAdminViewTest(APITestCase):
    """Test PUT /user/admin/<email>"""

    def setUp(self):
        self.admin = AdminUserFactory(email='boss@example.com')
        self.user = UserFactory(email='pat@example.com')
        self.url = reverse('user-make-admin', kwargs={'email': 'pat@example.com'})

    def test_admin_grants_role(self):
        response = self.client.put(self.url, **auth_header('boss@example.com'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['result']['role'], 'admin')
        self.user.refresh_from_db()
        self.assertTrue(self.user.is_admin)

    def test_non_admin_forbidden(self):
        other = UserFactory(email='other@example.com')
        url = reverse('user-make-admin', kwargs={'email': other.email})

        response = self.client.put(url, **auth_header('pat@example.com'))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        other.refresh_from_db()
        self.assertFalse(other.is_admin)

    def test_unknown_target(self):
        url = reverse('user-make-admin', kwargs={'email': 'ghost@example.com'})

        response = self.client.put(url, **auth_header('boss@example.com'))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_without_token(self):
        response = self.client.put(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
