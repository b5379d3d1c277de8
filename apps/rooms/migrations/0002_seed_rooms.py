from django.db import migrations

ROOMS = [
    (
        "General's Quarters",
        "generals-quarters",
        "A quiet corner room with a king-size bed and a view over the lake.",
    ),
    (
        "Colonel's Suite",
        "colonels-suite",
        "A two-room suite with a sitting area, fireplace and private balcony.",
    ),
]


def seed_rooms(apps, schema_editor):
    Room = apps.get_model("rooms", "Room")
    for room_name, slug, description in ROOMS:
        Room.objects.get_or_create(
            slug=slug,
            defaults={"room_name": room_name, "description": description},
        )


def remove_rooms(apps, schema_editor):
    Room = apps.get_model("rooms", "Room")
    Room.objects.filter(slug__in=[slug for _, slug, _ in ROOMS]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("rooms", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_rooms, remove_rooms),
    ]
