"""
Integration tests for the lab API.

These tests exercise signup/login, the customer dashboard, bookings,
blood test lookups and notifications through DRF's APIClient within
the APITestCase base class.

To run the tests:

```
pytest -q lab/tests
```
"""
import datetime

from django.urls import resolve
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from lab.models import Appointment, BloodAnalysis, Contact, HomeVisit, Notification, User
from lab.tests.helpers import PASSWORD, bearer, make_admin, make_user


def _future(days=3):
    return (timezone.localdate() + datetime.timedelta(days=days)).isoformat()


class AuthAPITests(APITestCase):
    def _signup_payload(self, **overrides):
        payload = {
            "firstName": "Ahmed",
            "lastName": "Ali",
            "email": "Ahmed@Example.com",
            "phone": "01099999999",
            "nationalId": "29501011234567",
            "password": PASSWORD,
            "confirmPassword": PASSWORD,
            "age": 30,
            "bloodType": "A+",
        }
        payload.update(overrides)
        return payload

    def test_signup_creates_user_and_returns_token(self):
        resp = self.client.post("/api/signup", self._signup_payload(), format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertTrue(resp.data["success"])
        self.assertTrue(resp.data["token"])
        self.assertEqual(resp.data["user"]["email"], "ahmed@example.com")
        self.assertEqual(resp.data["user"]["role"], "user")
        self.assertNotIn("password", resp.data["user"])
        user = User.objects.get(email="ahmed@example.com")
        self.assertTrue(user.check_password(PASSWORD))
        self.assertNotEqual(user.password, PASSWORD)

    def test_signup_rejects_mismatched_passwords(self):
        resp = self.client.post("/api/signup", self._signup_payload(confirmPassword="Other-Secure-2026!"), format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(resp.data["success"])
        self.assertEqual(resp.data["message"], "Passwords do not match")

    def test_signup_rejects_missing_field(self):
        payload = self._signup_payload()
        del payload["phone"]
        resp = self.client.post("/api/signup", payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("phone", resp.data["errors"])

    def test_signup_rejects_weak_password(self):
        resp = self.client.post("/api/signup", self._signup_payload(password="123", confirmPassword="123"), format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(User.objects.filter(email="ahmed@example.com").exists())

    def test_repeated_signup_is_rejected(self):
        first = self.client.post("/api/signup", self._signup_payload(), format="json")
        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        again = self.client.post("/api/signup", self._signup_payload(), format="json")
        self.assertEqual(again.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(again.data["message"], "User already exists with this email or national ID")
        same_nid = self.client.post(
            "/api/signup", self._signup_payload(email="other@example.com"), format="json"
        )
        self.assertEqual(same_nid.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(User.objects.count(), 1)

    def test_login_success_and_case_insensitive_email(self):
        make_user()
        resp = self.client.post("/api/login", {"email": "PATIENT@example.com", "password": PASSWORD}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertTrue(resp.data["token"])
        self.assertEqual(resp.data["user"]["email"], "patient@example.com")

    def test_login_ignores_stale_token(self):
        make_user()
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")
        resp = self.client.post("/api/login", {"email": "patient@example.com", "password": PASSWORD}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)

    def test_login_route_resolves_through_url_router(self):
        self.assertEqual(resolve("/api/login").url_name, "login_view")
        resp = self.client.post("/api/login", {"email": "nobody@example.com", "password": PASSWORD}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data, {"success": False, "message": "Invalid credentials"})


class CustomerAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = make_user()
        self.other = make_user(email="other@example.com", national_id="29101011234567")
        bearer(self.client, self.user)

    def test_profile_returns_current_user(self):
        resp = self.client.get("/api/user/profile")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["user"]["id"], self.user.id)
        self.assertEqual(resp.data["user"]["profileImage"], "/profile-image.jpg")
        self.assertNotIn("password", resp.data["user"])

    def test_profile_of_deleted_user_is_404(self):
        self.user.delete()
        resp = self.client.get("/api/user/profile")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["message"], "User not found")

    def test_dashboard_counts_and_limits(self):
        for i in range(4):
            BloodAnalysis.objects.create(
                user=self.user, test_number=f"TEST-1-{i}", test_name=f"T{i}",
                status=BloodAnalysis.STATUS_READY if i % 2 else BloodAnalysis.STATUS_PENDING,
            )
        BloodAnalysis.objects.create(user=self.other, test_number="TEST-2-0", test_name="foreign")
        today = timezone.localdate()
        Appointment.objects.create(user=self.user, test_type="CBC", appointment_date=today - datetime.timedelta(days=1),
                                   appointment_time="09:00", branch="Main")
        for d in range(1, 5):
            Appointment.objects.create(user=self.user, test_type="CBC", appointment_date=today + datetime.timedelta(days=d),
                                       appointment_time="09:00", branch="Main")
        for i in range(6):
            Notification.objects.create(user=self.user, message=f"n{i}", ntype=Notification.TYPE_GENERAL, is_read=i < 2)

        resp = self.client.get("/api/user/dashboard")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        data = resp.data["data"]
        self.assertEqual(len(data["recentTests"]), 3)
        self.assertEqual(len(data["upcomingAppointments"]), 3)
        self.assertEqual(data["upcomingAppointments"][0]["appointmentDate"], (today + datetime.timedelta(days=1)).isoformat())
        self.assertEqual(len(data["notifications"]), 5)
        self.assertEqual(data["counts"], {"tests": 4, "appointments": 4, "reports": 2, "notifications": 4})

    def test_book_appointment_creates_notification(self):
        payload = {"testType": "CBC", "appointmentDate": _future(), "appointmentTime": "10:30 AM", "branch": "Nasr City"}
        resp = self.client.post("/api/appointments", payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["appointment"]["status"], "scheduled")
        self.assertEqual(resp.data["appointment"]["userId"], self.user.id)
        notes = Notification.objects.filter(user=self.user)
        self.assertEqual(notes.count(), 1)
        self.assertEqual(notes.first().ntype, Notification.TYPE_APPOINTMENT)

    def test_book_appointment_accepts_js_datetime(self):
        when = (timezone.localdate() + datetime.timedelta(days=5)).isoformat() + "T00:00:00.000Z"
        payload = {"testType": "CBC", "appointmentDate": when, "appointmentTime": "10:30 AM", "branch": "Nasr City"}
        resp = self.client.post("/api/appointments", payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)

    def test_book_appointment_rejects_past_date(self):
        past = (timezone.localdate() - datetime.timedelta(days=1)).isoformat()
        payload = {"testType": "CBC", "appointmentDate": past, "appointmentTime": "10:30", "branch": "Main"}
        resp = self.client.post("/api/appointments", payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Appointment.objects.exists())
        self.assertFalse(Notification.objects.exists())

    def test_book_appointment_today_is_allowed(self):
        payload = {"testType": "CBC", "appointmentDate": timezone.localdate().isoformat(),
                   "appointmentTime": "23:00", "branch": "Main"}
        resp = self.client.post("/api/appointments", payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)

    def test_appointment_list_update_and_cancel(self):
        appt = Appointment.objects.create(user=self.user, test_type="CBC", appointment_date=timezone.localdate(),
                                          appointment_time="09:00", branch="Main")
        Appointment.objects.create(user=self.other, test_type="Lipids", appointment_date=timezone.localdate(),
                                   appointment_time="09:00", branch="Main")

        listing = self.client.get("/api/appointments")
        self.assertEqual([a["id"] for a in listing.data["appointments"]], [appt.id])

        upd = self.client.put(f"/api/appointments/{appt.id}", {"branch": "Heliopolis"}, format="json")
        self.assertEqual(upd.status_code, status.HTTP_200_OK)
        self.assertEqual(upd.data["appointment"]["branch"], "Heliopolis")

        cancel = self.client.delete(f"/api/appointments/{appt.id}")
        self.assertEqual(cancel.status_code, status.HTTP_200_OK)
        appt.refresh_from_db()
        self.assertEqual(appt.status, "cancelled")

    def test_foreign_appointment_is_not_found(self):
        foreign = Appointment.objects.create(user=self.other, test_type="CBC", appointment_date=timezone.localdate(),
                                             appointment_time="09:00", branch="Main")
        self.assertEqual(self.client.get(f"/api/appointments/{foreign.id}").status_code, status.HTTP_404_NOT_FOUND)
        resp = self.client.put(f"/api/appointments/{foreign.id}", {"branch": "X"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.client.delete(f"/api/appointments/{foreign.id}").status_code, status.HTTP_404_NOT_FOUND)
        foreign.refresh_from_db()
        self.assertEqual(foreign.branch, "Main")
        self.assertEqual(foreign.status, "scheduled")

    def test_home_visit_booking_and_cancel(self):
        payload = {"testType": "CBC", "visitDate": _future(2), "visitTime": "08:00",
                   "address": "12 Tahrir St, Cairo", "phone": "01011111111"}
        resp = self.client.post("/api/home-visits", payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        visit_id = resp.data["homeVisit"]["id"]
        self.assertEqual(Notification.objects.filter(user=self.user, ntype="appointment").count(), 1)

        listing = self.client.get("/api/home-visits")
        self.assertEqual(len(listing.data["homeVisits"]), 1)

        self.assertEqual(self.client.delete(f"/api/home-visits/{visit_id}").status_code, status.HTTP_200_OK)
        self.assertEqual(HomeVisit.objects.get(id=visit_id).status, "cancelled")

    def test_home_visit_rejects_past_date(self):
        past = (timezone.localdate() - datetime.timedelta(days=3)).isoformat()
        payload = {"testType": "CBC", "visitDate": past, "visitTime": "08:00",
                   "address": "12 Tahrir St", "phone": "01011111111"}
        resp = self.client.post("/api/home-visits", payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(HomeVisit.objects.exists())

    def test_booking_for_deleted_account_is_404(self):
        self.user.delete()
        appt = {"testType": "CBC", "appointmentDate": _future(), "appointmentTime": "10:30", "branch": "Main"}
        visit = {"testType": "CBC", "visitDate": _future(2), "visitTime": "08:00",
                 "address": "12 Tahrir St", "phone": "01011111111"}
        for url, payload in (("/api/appointments", appt), ("/api/home-visits", visit)):
            resp = self.client.post(url, payload, format="json")
            self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
            self.assertEqual(resp.data["message"], "User not found")
        self.assertFalse(Appointment.objects.exists())
        self.assertFalse(HomeVisit.objects.exists())
        self.assertFalse(Notification.objects.exists())

    def test_blood_analysis_scoping(self):
        mine = BloodAnalysis.objects.create(user=self.user, test_number="TEST-10-1", test_name="CBC",
                                            results={"hemoglobin": 14.1})
        theirs = BloodAnalysis.objects.create(user=self.other, test_number="TEST-10-2", test_name="Lipids")

        own = self.client.get("/api/blood-analysis")
        self.assertEqual([t["testNumber"] for t in own.data["tests"]], [mine.test_number])

        by_id = self.client.get(f"/api/blood-analysis/{self.user.id}")
        self.assertEqual(by_id.status_code, status.HTTP_200_OK)
        self.assertEqual(len(by_id.data["tests"]), 1)
        self.assertEqual(self.client.get(f"/api/blood-analysis/{self.other.id}").status_code, status.HTTP_404_NOT_FOUND)

        result = self.client.get(f"/api/blood-analysis/result/{mine.test_number}")
        self.assertEqual(result.status_code, status.HTTP_200_OK)
        self.assertEqual(result.data["test"]["user"]["email"], self.user.email)
        self.assertEqual(result.data["test"]["results"], {"hemoglobin": 14.1})
        self.assertEqual(
            self.client.get(f"/api/blood-analysis/result/{theirs.test_number}").status_code,
            status.HTTP_404_NOT_FOUND,
        )
        self.assertEqual(self.client.get("/api/blood-analysis/result/TEST-0-0").status_code, status.HTTP_404_NOT_FOUND)

    def test_admin_reads_any_users_tests(self):
        BloodAnalysis.objects.create(user=self.other, test_number="TEST-11-1", test_name="Lipids")
        bearer(self.client, make_admin())
        resp = self.client.get(f"/api/blood-analysis/{self.other.id}")
        self.assertEqual(len(resp.data["tests"]), 1)
        result = self.client.get("/api/blood-analysis/result/TEST-11-1")
        self.assertEqual(result.data["test"]["user"]["id"], self.other.id)

    def test_notifications_list_and_mark_read(self):
        n = Notification.objects.create(user=self.user, message="hello", ntype=Notification.TYPE_GENERAL)
        foreign = Notification.objects.create(user=self.other, message="x", ntype=Notification.TYPE_GENERAL)

        listing = self.client.get("/api/notifications")
        self.assertEqual([x["id"] for x in listing.data["notifications"]], [n.id])
        self.assertEqual(listing.data["notifications"][0]["type"], "general")

        self.assertEqual(self.client.put(f"/api/notifications/{n.id}/read").status_code, status.HTTP_200_OK)
        n.refresh_from_db()
        self.assertTrue(n.is_read)

        self.assertEqual(self.client.put(f"/api/notifications/{foreign.id}/read").status_code, status.HTTP_404_NOT_FOUND)
        foreign.refresh_from_db()
        self.assertFalse(foreign.is_read)


class PublicAPITests(APITestCase):
    def test_contact_form_is_public_and_sanitized(self):
        payload = {"name": "<b>Sara</b>", "email": "sara@example.com", "subject": "Hours",
                   "message": "<script>alert(1)</script>When do you open?"}
        resp = self.client.post("/api/contact", payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        msg = Contact.objects.get()
        self.assertEqual(msg.name, "Sara")
        self.assertNotIn("<script>", msg.message)
        self.assertFalse(msg.is_read)

    def test_contact_form_requires_fields(self):
        resp = self.client.post("/api/contact", {"name": "Sara"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Contact.objects.exists())

    def test_contact_form_keeps_plain_ampersands(self):
        payload = {"name": "Tom & Jerry", "email": "tj@example.com", "subject": "Q & A",
                   "message": "Fasting & glucose?", "phone": "01000000000"}
        resp = self.client.post("/api/contact", payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        msg = Contact.objects.get()
        self.assertEqual(msg.name, "Tom & Jerry")
        self.assertEqual(msg.subject, "Q & A")
        self.assertEqual(msg.message, "Fasting & glucose?")

    def test_contact_form_rejects_markup_only_fields(self):
        payload = {"name": "<b></b>", "email": "x@example.com", "subject": "Hi", "message": "Hello"}
        resp = self.client.post("/api/contact", payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("name", resp.data["errors"])
        self.assertFalse(Contact.objects.exists())

    def test_healthz(self):
        resp = self.client.get("/healthz")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json(), {"success": True, "db": True})

    def test_unknown_path_is_json_404(self):
        resp = self.client.get("/api/nope")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.json(), {"success": False, "message": "Not found"})
