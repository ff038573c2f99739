import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("external_event_id", models.PositiveBigIntegerField(unique=True)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("organizer", models.CharField(db_index=True, max_length=42)),
                ("max_attendees", models.PositiveIntegerField(blank=True, null=True)),
                ("is_locked", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="event_created_idx")
                ],
            },
        ),
        migrations.CreateModel(
            name="CheckIn",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("wallet_address", models.CharField(max_length=42)),
                (
                    "checked_in_at",
                    models.DateTimeField(
                        default=django.utils.timezone.now, editable=False
                    ),
                ),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="check_ins",
                        to="admissions.event",
                    ),
                ),
            ],
            options={
                "ordering": ["checked_in_at"],
                "indexes": [
                    models.Index(
                        fields=["event", "checked_in_at"],
                        name="checkin_event_time_idx",
                    ),
                    models.Index(fields=["wallet_address"], name="checkin_wallet_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("event", "wallet_address"),
                        name="unique_check_in_per_wallet",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Giveaway",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("winner_count", models.PositiveIntegerField()),
                ("winners", models.JSONField(blank=True, default=list)),
                ("tx_hash", models.CharField(blank=True, max_length=66, null=True)),
                ("executed_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "event",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="giveaway",
                        to="admissions.event",
                    ),
                ),
            ],
        ),
    ]
