"""
Django admin configuration for authentication models.

This module registers User, LinkedAccount and Session with the Django admin
site. Account status is managed here (e.g. blocking an account); accounts are
moved to the deleted status rather than removed.

Related files:
    - models.py: Model definitions
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from authentication.models import LinkedAccount, Session, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin configuration for User model.

    Customized for email-based authentication with an account status
    instead of Django's is_active flag.
    """

    list_display = (
        "email",
        "status",
        "is_email_verified",
        "auth_method",
        "is_staff",
        "date_joined",
    )
    list_filter = (
        "status",
        "is_email_verified",
        "auth_method",
        "is_staff",
        "is_superuser",
        "date_joined",
    )
    search_fields = ("email",)
    ordering = ("-date_joined",)

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        (
            "Status",
            {"fields": ("status", "is_email_verified", "auth_method")},
        ),
        (
            "Last device",
            {"fields": ("device_id", "device_type", "fcm_token")},
        ),
        (
            "Permissions",
            {"fields": ("is_staff", "is_superuser", "groups", "user_permissions")},
        ),
        (
            "Important dates",
            {"fields": ("date_joined", "last_login")},
        ),
    )

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "password1", "password2"),
            },
        ),
    )

    readonly_fields = ("date_joined", "last_login")


@admin.register(LinkedAccount)
class LinkedAccountAdmin(admin.ModelAdmin):
    """Social provider identities linked to users."""

    list_display = (
        "user",
        "provider",
        "provider_user_id",
        "created_at",
    )
    list_filter = ("provider", "created_at")
    search_fields = ("user__email", "provider_user_id")
    ordering = ("-created_at",)

    raw_id_fields = ("user",)
    readonly_fields = ("created_at", "updated_at")


@admin.register(Session)
class SessionAdmin(admin.ModelAdmin):
    """Login sessions; expire them with the bulk action."""

    list_display = (
        "id",
        "user",
        "device_type",
        "device_id",
        "is_live_display",
        "created_at",
        "expired_at",
    )
    list_filter = ("device_type", "created_at", "expired_at")
    search_fields = ("user__email", "device_id")
    ordering = ("-created_at",)
    actions = ["expire_selected"]

    raw_id_fields = ("user",)
    readonly_fields = ("created_at", "updated_at")

    @admin.display(boolean=True, description="Live")
    def is_live_display(self, obj):
        return obj.is_live

    @admin.action(description="Expire selected sessions")
    def expire_selected(self, request, queryset):
        expired = queryset.expire()
        self.message_user(request, f"Expired {expired} session(s).")
