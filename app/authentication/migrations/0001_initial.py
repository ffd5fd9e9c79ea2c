# Generated manually - Initial authentication schema

import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    """
    Create User, LinkedAccount and Session.
    """

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("password", models.CharField(max_length=128, verbose_name="password")),
                (
                    "last_login",
                    models.DateTimeField(blank=True, null=True, verbose_name="last login"),
                ),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "email",
                    models.EmailField(
                        blank=True,
                        help_text="User's email address (primary identifier)",
                        max_length=254,
                        null=True,
                        unique=True,
                    ),
                ),
                (
                    "is_email_verified",
                    models.BooleanField(
                        default=False,
                        help_text="Whether the user's email has been verified",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("active", "Active"),
                            ("inactive", "Inactive"),
                            ("deleted", "Deleted"),
                            ("blocked", "Blocked"),
                        ],
                        db_index=True,
                        default="pending",
                        help_text="Account lifecycle status",
                        max_length=20,
                    ),
                ),
                (
                    "code",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Outstanding one-time code for verification or password reset",
                        max_length=12,
                    ),
                ),
                (
                    "auth_method",
                    models.CharField(
                        choices=[
                            ("email", "Email"),
                            ("google", "Google"),
                            ("apple", "Apple"),
                            ("facebook", "Facebook"),
                        ],
                        default="email",
                        help_text="Authentication method the account was created with",
                        max_length=20,
                    ),
                ),
                ("device_id", models.CharField(blank=True, default="", max_length=255)),
                (
                    "device_type",
                    models.CharField(
                        blank=True,
                        choices=[("ios", "iOS"), ("android", "Android"), ("web", "Web")],
                        default="",
                        max_length=20,
                    ),
                ),
                ("fcm_token", models.CharField(blank=True, default="", max_length=512)),
                (
                    "is_staff",
                    models.BooleanField(
                        default=False,
                        help_text="Whether the user can access the admin site.",
                    ),
                ),
                (
                    "date_joined",
                    models.DateTimeField(
                        auto_now_add=True,
                        help_text="When the user account was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="When the user record was last modified",
                    ),
                ),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "verbose_name": "user",
                "verbose_name_plural": "users",
                "ordering": ["-date_joined"],
            },
        ),
        migrations.CreateModel(
            name="LinkedAccount",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "provider",
                    models.CharField(
                        choices=[
                            ("email", "Email"),
                            ("google", "Google"),
                            ("apple", "Apple"),
                            ("facebook", "Facebook"),
                        ],
                        db_index=True,
                        help_text="Authentication provider",
                        max_length=20,
                    ),
                ),
                (
                    "provider_user_id",
                    models.CharField(
                        help_text="Unique identifier from the provider",
                        max_length=255,
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        help_text="User this linked account belongs to",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="linked_accounts",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "linked account",
                "verbose_name_plural": "linked accounts",
                "db_table": "authentication_linked_account",
                "constraints": [
                    models.UniqueConstraint(
                        fields=("provider", "provider_user_id"),
                        name="unique_provider_user",
                    ),
                    models.UniqueConstraint(
                        fields=("user", "provider"),
                        name="unique_user_provider",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Session",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("device_id", models.CharField(blank=True, default="", max_length=255)),
                (
                    "device_type",
                    models.CharField(
                        blank=True,
                        choices=[("ios", "iOS"), ("android", "Android"), ("web", "Web")],
                        default="",
                        max_length=20,
                    ),
                ),
                ("fcm_token", models.CharField(blank=True, default="", max_length=512)),
                (
                    "expired_at",
                    models.DateTimeField(
                        blank=True,
                        help_text="When this session was invalidated (null while live)",
                        null=True,
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        help_text="User this session belongs to",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="sessions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "session",
                "verbose_name_plural": "sessions",
                "db_table": "authentication_session",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["user", "expired_at"],
                        name="auth_session_user_expired_idx",
                    ),
                ],
            },
        ),
    ]
