"""
URL mappings for the hospital patient application.

Paths carry no trailing slash.  ``/user/...`` pages need the USER role,
``/admin/...`` pages and endpoints need ADMIN; the guards live on the
views themselves (see ``core.permissions``).
"""
from django.contrib.auth import views as auth_views
from django.urls import include, path

from .views import accounts, api, health, patients

urlpatterns = [
    path('', patients.home, name='home'),
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz, name='healthz'),
    # Authentication
    path('login', auth_views.LoginView.as_view(), name='login'),
    path('logout', auth_views.LogoutView.as_view(), name='logout'),
    # Patients (HTML)
    path('user/index', patients.index, name='patients_index'),
    path('admin/deletePatient', patients.delete_patient, name='delete_patient'),
    path('admin/formPatients', patients.form_patients, name='form_patients'),
    path('admin/save', patients.save_patient, name='save_patient'),
    path('admin/editPatient', patients.edit_patient, name='edit_patient'),
    # Patients (JSON)
    path('patients', api.list_patients, name='patients_json'),
    # Account administration (JSON)
    path('admin/api/users', accounts.create_user, name='account_create_user'),
    path('admin/api/users/<str:username>', accounts.user_detail, name='account_user_detail'),
    path('admin/api/users/<str:username>/roles', accounts.grant_role, name='account_grant_role'),
    path('admin/api/users/<str:username>/roles/<str:role>', accounts.revoke_role, name='account_revoke_role'),
    path('admin/api/roles', accounts.roles, name='account_roles'),
]
