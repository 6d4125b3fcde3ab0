from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
        ("notes", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="CalendarEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("date", models.DateField(db_index=True)),
                ("kind", models.CharField(choices=[("normal", "Normal"), ("review", "Review")], default="normal", max_length=12)),
                ("color", models.CharField(default="#3b82f6", max_length=32)),
                ("note", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="events", to="notes.note")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="auth.user")),
            ],
            options={
                "ordering": ["date", "id"],
            },
        ),
        migrations.AddIndex(
            model_name="calendarevent",
            index=models.Index(fields=["user", "date"], name="calendar_event_user_date_idx"),
        ),
    ]
