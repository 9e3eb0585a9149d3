# ======================================
# Resource Repositories
# ======================================
#
# One repository per model. Every operation is a single parameterized
# statement; failures propagate as sqlalchemy.exc.StatementError and are
# turned into HTTP 400 responses by the error handler in app.py.

from sqlalchemy import text

from fields import first_of, or_default, or_none, room_number
from models import Appointment, Bill, Department, Doctor, Medication, Patient, db


class Repository:
    model = None
    list_sql = None

    @property
    def table(self):
        return self.model.__table__

    @property
    def key(self):
        return next(iter(self.table.primary_key))

    @property
    def columns(self):
        return [column.name for column in self.table.columns if not column.primary_key]

    def bind(self, body):
        """Map a request body onto column values."""
        return {column: body.get(column) for column in self.columns}

    def create(self, body):
        affected, insert_id = self._write(db.insert(self.table).values(**self.bind(body)))
        return {'affectedRows': affected, 'insertId': insert_id or 0}

    def list(self):
        if self.list_sql:
            statement = text(self.list_sql)
        else:
            statement = db.select(self.table).order_by(self.key.desc())
        rows = db.session.execute(statement).mappings().all()
        return [dict(row) for row in rows]

    def update(self, ident, body):
        statement = db.update(self.table).where(self.key == ident).values(**self.bind(body))
        affected, _ = self._write(statement)
        # No matching row is not an error
        return {'affectedRows': affected, 'insertId': 0}

    def delete(self, ident):
        affected, _ = self._write(db.delete(self.table).where(self.key == ident))
        return {'affectedRows': affected, 'insertId': 0}

    def _write(self, statement):
        try:
            result = db.session.execute(statement)
            affected = result.rowcount
            insert_id = result.inserted_primary_key[0] if statement.is_insert else 0
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return affected, insert_id


class DepartmentRepository(Repository):
    model = Department


class PatientRepository(Repository):
    model = Patient

    def bind(self, body):
        return {
            'name': body.get('name'),
            'age': or_none(body.get('age')),
            'gender': or_none(body.get('gender')),
            'phone': or_none(body.get('phone')),
        }


class DoctorRepository(Repository):
    model = Doctor
    list_sql = """
        SELECT d.doctor_id, d.name, d.specialization, d.phone, d.room_no, d.department_id,
               dep.name AS department
        FROM doctors d
        LEFT JOIN departments dep ON d.department_id = dep.department_id
        ORDER BY d.doctor_id DESC
    """

    def bind(self, body):
        return {
            'name': body.get('name'),
            'specialization': or_none(body.get('specialization')),
            # older clients post "contact"
            'phone': or_none(first_of(body, 'phone', 'contact')),
            'room_no': room_number(body.get('room_no')),
            'department_id': or_none(body.get('department_id')),
        }


class AppointmentRepository(Repository):
    model = Appointment
    list_sql = """
        SELECT a.appointment_id, a.patient_id, a.doctor_id,
               a.appointment_date AS date, a.appointment_time AS time, a.reason,
               p.name AS patient, d.name AS doctor
        FROM appointments a
        JOIN patients p ON a.patient_id = p.patient_id
        JOIN doctors d ON a.doctor_id = d.doctor_id
        ORDER BY a.appointment_id DESC
    """

    def bind(self, body):
        return {
            'patient_id': body.get('patient_id'),
            'doctor_id': body.get('doctor_id'),
            'appointment_date': first_of(body, 'appointment_date', 'date'),
            'appointment_time': first_of(body, 'appointment_time', 'time'),
            'reason': or_none(body.get('reason')),
        }


class MedicationRepository(Repository):
    model = Medication
    list_sql = """
        SELECT m.medication_id, m.patient_id, m.doctor_id, m.name, m.dosage,
               p.name AS patient, d.name AS doctor
        FROM medications m
        JOIN patients p ON m.patient_id = p.patient_id
        JOIN doctors d ON m.doctor_id = d.doctor_id
        ORDER BY m.medication_id DESC
    """

    def bind(self, body):
        return {
            'patient_id': body.get('patient_id'),
            'doctor_id': body.get('doctor_id'),
            'name': body.get('name'),
            # dosage column is NOT NULL
            'dosage': or_default(body.get('dosage'), ''),
        }


class BillingRepository(Repository):
    model = Bill
    list_sql = """
        SELECT b.bill_id, b.pat_id, b.amount, b.date_of_bill, b.payment_method,
               p.name AS patient
        FROM billing b
        JOIN patients p ON b.pat_id = p.patient_id
        ORDER BY b.bill_id DESC
    """

    def bind(self, body):
        return {
            'pat_id': first_of(body, 'pat_id', 'patient_id'),
            'amount': or_default(body.get('amount'), 0),
            'date_of_bill': or_none(body.get('date_of_bill')),
            'payment_method': or_none(body.get('payment_method')),
        }


# (singular, plural, repository) for every resource exposed over HTTP
RESOURCES = [
    ('department', 'departments', DepartmentRepository()),
    ('patient', 'patients', PatientRepository()),
    ('doctor', 'doctors', DoctorRepository()),
    ('appointment', 'appointments', AppointmentRepository()),
    ('medication', 'medications', MedicationRepository()),
    ('billing', 'billing', BillingRepository()),
]
