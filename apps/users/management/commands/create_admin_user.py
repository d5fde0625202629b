"""
Create a back-office admin user.
"""
import logging

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from ...domain.validators.strong_password import StrongPasswordValidator

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Creates a staff user for the admin panel'

    def add_arguments(self, parser):
        parser.add_argument('email')
        parser.add_argument('password')
        parser.add_argument('--first-name', default='')
        parser.add_argument('--last-name', default='')
        parser.add_argument(
            '--superuser',
            action='store_true',
            help='Grant every permission',
        )

    def handle(self, *args, **options):
        email = options['email'].strip().lower()
        password = options['password']
        user_model = get_user_model()

        if user_model.objects.filter(username=email).exists():
            raise CommandError(f"An admin user with email '{email}' already exists")

        violations = StrongPasswordValidator().validate(password)
        if not password or violations:
            raise CommandError(violations[0].message if violations else "Password is required")

        factory = user_model.objects.create_superuser if options['superuser'] else user_model.objects.create_user
        user = factory(
            username=email,
            email=email,
            password=password,
            first_name=options['first_name'],
            last_name=options['last_name'],
        )
        if not user.is_staff:
            user.is_staff = True
            user.save(update_fields=['is_staff'])

        logger.info("Admin user %s created", email)
        self.stdout.write(self.style.SUCCESS(f"Admin user '{email}' created successfully"))
