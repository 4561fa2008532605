import json

from django.contrib.auth.models import User
from django.test import TestCase

from accounts.models import Profile, UserPreferences, CompanyInfo

PASSWORD = 'Panda-roadmap-2025'


class AccountApiTests(TestCase):

    def post_json(self, url, body):
        return self.client.post(url, data=json.dumps(body), content_type='application/json')

    def test_register_logs_in_and_creates_profile(self):
        response = self.post_json('/accounts/register/', {
            'email': 'Ada@Example.com', 'password': PASSWORD, 'name': 'Ada'
        })

        self.assertEqual(response.status_code, 201)
        user = User.objects.get()
        self.assertEqual(user.username, 'ada@example.com')
        self.assertEqual(user.profile.name, 'Ada')
        self.assertEqual(self.client.get('/accounts/profile/').status_code, 200)

    def test_register_rejects_duplicates_and_mismatched_passwords(self):
        User.objects.create_user(username='ada@example.com', email='ada@example.com', password=PASSWORD)

        response = self.post_json('/accounts/register/', {'email': 'ada@example.com', 'password': PASSWORD})
        self.assertEqual(response.status_code, 400)
        self.assertIn('email', response.json()['errors'])

        response = self.post_json('/accounts/register/', {
            'email': 'bob@example.com', 'password': PASSWORD, 'password_confirm': 'different-pass-1'
        })
        self.assertEqual(response.status_code, 400)

    def test_login_by_email(self):
        User.objects.create_user(username='ada', email='ada@example.com', password=PASSWORD)

        response = self.post_json('/accounts/login/', {'email': 'ADA@example.com', 'password': PASSWORD})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['email'], 'ada@example.com')

        self.client.logout()
        response = self.post_json('/accounts/login/', {'email': 'ada@example.com', 'password': 'wrong'})
        self.assertEqual(response.status_code, 400)


class AccountSettingsTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='ada@example.com', email='ada@example.com', password=PASSWORD)
        self.client.force_login(self.user)

    def post_json(self, url, body):
        return self.client.post(url, data=json.dumps(body), content_type='application/json')

    def test_profile_partial_update(self):
        Profile.objects.filter(user=self.user).update(name='Ada', company='Analytical Engines')

        response = self.post_json('/accounts/profile/', {'role': 'Head of Product'})

        self.assertEqual(response.status_code, 200)
        profile = response.json()['profile']
        self.assertEqual(profile['role'], 'Head of Product')
        self.assertEqual(profile['company'], 'Analytical Engines')
        self.assertEqual(profile['email'], 'ada@example.com')

    def test_profile_validation(self):
        response = self.post_json('/accounts/profile/', {'avatar_url': 'not a url'})
        self.assertEqual(response.status_code, 400)

    def test_preferences_defaults_then_update(self):
        data = self.client.get('/accounts/preferences/').json()['preferences']
        self.assertEqual(data, {
            'prd_template_style': 'lean-startup',
            'spec_template_style': 'technical-detailed',
            'communication_style': 'concise',
        })

        self.post_json('/accounts/preferences/', {'communication_style': 'detailed'})

        preferences = UserPreferences.objects.get(user=self.user)
        self.assertEqual(preferences.communication_style, 'detailed')
        self.assertEqual(preferences.prd_template_style, 'lean-startup')

    def test_company_info_upsert(self):
        self.assertIsNone(self.client.get('/accounts/company-info/').json()['company_info'])

        response = self.post_json('/accounts/company-info/', {'company_name': 'Acme', 'industry': 'Retail'})
        self.assertEqual(response.status_code, 201)

        response = self.post_json('/accounts/company-info/', {'mission': 'Sell everything'})
        self.assertEqual(response.status_code, 200)

        info = CompanyInfo.objects.get(user=self.user)
        self.assertEqual((info.company_name, info.industry, info.mission), ('Acme', 'Retail', 'Sell everything'))
        self.assertEqual(CompanyInfo.objects.count(), 1)
