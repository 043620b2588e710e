"""
Management command to seed test users for development/testing.
Creates a basic user, an admin and a second user for checking author-only controls.
"""
from django.core.management.base import BaseCommand
from django.db import transaction
from accounts.models import User
from species.rules import validate_species
from species.store import OrmSpeciesStore


class Command(BaseCommand):
    help = 'Seeds default test users (and optionally sample species) for development'

    TEST_USERS = [
        {
            'username': 'testuser',
            'email': 'testuser@example.com',
            'password': 'testpass123',
            'is_staff': False,
            'is_superuser': False,
        },
        {
            'username': 'admin',
            'email': 'admin@example.com',
            'password': 'adminpass123',
            'is_staff': True,
            'is_superuser': True,
        },
        {
            'username': 'otheruser',
            'email': 'otheruser@example.com',
            'password': 'otherpass123',
            'is_staff': False,
            'is_superuser': False,
        },
    ]

    SAMPLE_SPECIES = [
        {
            'scientific_name': 'Cavia porcellus',
            'common_name': 'Guinea pig',
            'kingdom': 'Animalia',
            'total_population': 300000,
            'description': 'A domesticated species of rodent belonging to the genus Cavia.',
        },
        {
            'scientific_name': 'Amanita muscaria',
            'common_name': 'Fly agaric',
            'kingdom': 'Fungi',
        },
        {
            'scientific_name': 'Quercus robur',
            'common_name': 'English oak',
            'kingdom': 'Plantae',
        },
    ]

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Force recreation of test users (deletes existing)',
        )
        parser.add_argument(
            '--with-species',
            action='store_true',
            help='Also create sample species authored by testuser',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        force = options.get('force', False)
        created_count = 0
        skipped_count = 0

        self.stdout.write('Seeding test users...')

        for user_data in self.TEST_USERS:
            user_data = dict(user_data)
            username = user_data['username']

            existing_user = User.objects.filter(username=username).first()
            if existing_user:
                if not force:
                    self.stdout.write(
                        self.style.WARNING(f'User already exists: {username} (use --force to recreate)')
                    )
                    skipped_count += 1
                    continue
                self.stdout.write(self.style.WARNING(f'Deleting existing user: {username}'))
                existing_user.delete()

            password = user_data.pop('password')
            user = User(**user_data)
            user.set_password(password)
            user.save()
            created_count += 1
            self.stdout.write(self.style.SUCCESS(f'Created user: {username}'))

        if options.get('with_species'):
            self._seed_species()

        self.stdout.write('\n' + '=' * 50)
        if created_count:
            self.stdout.write(self.style.SUCCESS(f'Created {created_count} test user(s)'))
            self.stdout.write('\nTest User Credentials:')
            self.stdout.write('-' * 50)
            for user_data in self.TEST_USERS:
                self.stdout.write(f"  {user_data['username']:<12} | password: {user_data['password']}")
        if skipped_count:
            self.stdout.write(self.style.WARNING(f'Skipped {skipped_count} existing user(s)'))
        self.stdout.write('=' * 50)

    def _seed_species(self):
        """Insert sample species through the same rules and store the pages use."""
        author = User.objects.get(username='testuser')
        store = OrmSpeciesStore(author.pk)
        existing = {record.scientific_name for record in store.list('scientific_name')}

        for raw in self.SAMPLE_SPECIES:
            if raw['scientific_name'] in existing:
                self.stdout.write(self.style.WARNING(f"Species already exists: {raw['scientific_name']}"))
                continue
            record = store.insert(validate_species(raw))
            self.stdout.write(self.style.SUCCESS(f'Created species #{record.id}: {record.scientific_name}'))
