"""
Django admin registrations.

Mounted at ``/django-admin/`` so superusers can inspect patients,
accounts and roles during development.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import AppRole, AppUser, Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'last_name', 'first_name', 'birth_date', 'score', 'sick')
    list_filter = ('sick',)
    search_fields = ('last_name', 'first_name')


@admin.register(AppRole)
class AppRoleAdmin(admin.ModelAdmin):
    list_display = ('role',)
    search_fields = ('role',)


@admin.register(AppUser)
class AppUserAdmin(UserAdmin):
    list_display = ('username', 'email', 'user_id', 'is_staff', 'is_active')
    search_fields = ('username', 'email', 'user_id')
    readonly_fields = ('user_id',)
    filter_horizontal = ('roles', 'groups', 'user_permissions')
    fieldsets = UserAdmin.fieldsets + (
        ('Application', {'fields': ('user_id', 'roles')}),
    )
