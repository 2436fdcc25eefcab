"""
Management command to populate the database with demo data.
"""
import random

from django.core.management.base import BaseCommand
from django.db import transaction

from records.models import Patient, ClinicalData

FIRST_NAMES = ['John', 'Jane', 'Alex', 'Maria', 'Sam', 'Priya', 'Chen', 'Fatima']
LAST_NAMES = ['Smith', 'Garcia', 'Nguyen', 'Khan', 'Brown', 'Rossi', 'Okafor', 'Lee']

# component name -> generator for a plausible value
COMPONENTS = {
    'bp': lambda: f"{random.randint(100, 150)}/{random.randint(60, 95)}",
    'hr': lambda: str(random.randint(55, 110)),
    'heightweight': lambda: f"{random.randint(150, 195)}/{random.randint(45, 120)}",
    'glucose': lambda: str(random.randint(70, 180)),
    'o2': lambda: str(random.randint(90, 100)),
}


class Command(BaseCommand):
    help = 'Populate database with demo patients and clinical data'

    def add_arguments(self, parser):
        parser.add_argument('--patients', type=int, default=5, help='number of patients to create')
        parser.add_argument('--measurements', type=int, default=3,
                            help='measurements to create per patient')
        parser.add_argument('--clear', action='store_true', help='delete existing records first')

    def handle(self, *args, **options):
        with transaction.atomic():
            if options['clear']:
                ClinicalData.objects.all().delete()
                Patient.objects.all().delete()
                self.stdout.write('Cleared existing records')

            patients = self.create_patients(options['patients'])
            created = self.create_clinical_data(patients, options['measurements'])

        self.stdout.write(self.style.SUCCESS(
            f'Created {len(patients)} patients and {created} clinical data records'
        ))

    def create_patients(self, count):
        return [
            Patient.objects.create(
                first_name=random.choice(FIRST_NAMES),
                last_name=random.choice(LAST_NAMES),
                age=random.randint(18, 90),
            )
            for _ in range(count)
        ]

    def create_clinical_data(self, patients, per_patient):
        created = 0
        for patient in patients:
            for _ in range(per_patient):
                name = random.choice(list(COMPONENTS))
                ClinicalData.objects.create(
                    component_name=name,
                    component_value=COMPONENTS[name](),
                    patient=patient,
                )
                created += 1
        return created
