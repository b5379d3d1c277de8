from django.db import migrations

RESTRICTIONS = [
    (1, "Reservation"),
    (2, "Owner Block"),
]


def seed_restrictions(apps, schema_editor):
    Restriction = apps.get_model("reservations", "Restriction")
    for pk, name in RESTRICTIONS:
        Restriction.objects.update_or_create(pk=pk, defaults={"restriction_name": name})


def remove_restrictions(apps, schema_editor):
    Restriction = apps.get_model("reservations", "Restriction")
    Restriction.objects.filter(pk__in=[pk for pk, _ in RESTRICTIONS]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("reservations", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_restrictions, remove_restrictions),
    ]
