# hr_core/api/urls.py
from __future__ import annotations

from django.urls import path
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from hr_core.admissions.api.views import AdmissionViewSet
from hr_core.consents.api.views import HospitalConsentViewSet, PatientConsentViewSet
from hr_core.dashboards.api.views import HospitalDashboardView, PatientDashboardView
from hr_core.emergency.api.views import EmergencyPatientViewSet
from hr_core.iam.api.auth import LoginView, LogoutView, RefreshView
from hr_core.iam.api.me import MeView
from hr_core.notifications.api.views import NotificationViewSet
from hr_core.patients.api.views import FamilyMemberViewSet
from hr_core.records.api.views import (
    HospitalPatientRecordViewSet,
    HospitalPrescriptionViewSet,
    HospitalReportViewSet,
    LabReportViewSet,
    PatientPrescriptionViewSet,
    PatientReportViewSet,
)
from hr_core.reminders.api.views import ReminderViewSet

router = DefaultRouter()

# Patient portal
router.register(r"patient/family-members", FamilyMemberViewSet, basename="patient-family-members")
router.register(r"patient/prescriptions", PatientPrescriptionViewSet, basename="patient-prescriptions")
router.register(r"patient/reports", PatientReportViewSet, basename="patient-reports")
router.register(r"patient/consents", PatientConsentViewSet, basename="patient-consents")
router.register(r"reminders", ReminderViewSet, basename="reminders")

# Hospital portal
router.register(r"hospital/consents", HospitalConsentViewSet, basename="hospital-consents")
router.register(r"hospital/patients", HospitalPatientRecordViewSet, basename="hospital-patients")
router.register(r"hospital/prescriptions", HospitalPrescriptionViewSet, basename="hospital-prescriptions")
router.register(r"hospital/reports", HospitalReportViewSet, basename="hospital-reports")
router.register(r"hospital/emergency-patients", EmergencyPatientViewSet, basename="hospital-emergency-patients")
router.register(r"hospital/admissions", AdmissionViewSet, basename="hospital-admissions")

# Lab portal
router.register(r"lab/reports", LabReportViewSet, basename="lab-reports")

# Everyone
router.register(r"notifications", NotificationViewSet, basename="notifications")

urlpatterns = [
    # Auth + /me
    path("auth/token/", TokenObtainPairView.as_view(), name="token-obtain"),
    path("auth/token/refresh/", TokenRefreshView.as_view(), name="token-refresh"),
    path("auth/login/", LoginView.as_view(), name="login"),
    path("auth/refresh/", RefreshView.as_view(), name="refresh"),
    path("auth/logout/", LogoutView.as_view(), name="logout"),
    path("me/", MeView.as_view(), name="me"),

    path("hospital/dashboard/", HospitalDashboardView.as_view(), name="hospital-dashboard"),
    path("patient/dashboard/", PatientDashboardView.as_view(), name="patient-dashboard"),

    # Router URLs last (so explicit paths win if ever overlapping)
    *router.urls,
]
