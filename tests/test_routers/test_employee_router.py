import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from config.database import enable_sqlite_foreign_keys, get_db
from models.base import Base
from models.department import Department

ASHA = {
    "name": "Asha Rao",
    "email": "asha@example.com",
    "phone_number": "9876543210",
    "dob": "1996-04-12",
    "major": "Computer Science",
    "city": "Bengaluru",
    "department": "IT",
}


class EmployeeRouterTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        enable_sqlite_foreign_keys(self.engine)
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine, autoflush=False)

        with self.Session() as db:
            db.add_all([
                Department(code="IT", name="Information Technology", floor=1, description=""),
                Department(code="CSE", name="Computer Science", floor=3, description=""),
            ])
            db.commit()

        def _test_db():
            db = self.Session()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _test_db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        self.engine.dispose()

    def _create(self, **overrides):
        resp = self.client.post("/api/v1/employees", json={**ASHA, **overrides})
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    # --- CREATE ---

    def test_create_employee_201(self):
        body = self._create()
        self.assertIsInstance(body["id"], int)
        self.assertEqual(body, {**ASHA, "id": body["id"], "deleted_at": None})

    def test_create_employee_invalid_department_400(self):
        resp = self.client.post("/api/v1/employees", json={**ASHA, "department": "BIO"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error_code"], "INVALID_PARAMETER")

    def test_create_employee_missing_department_404(self):
        resp = self.client.post("/api/v1/employees", json={**ASHA, "department": "ME"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error_code"], "ENTITY_NOT_FOUND")

    def test_create_employee_duplicate_email_409(self):
        self._create()
        resp = self.client.post("/api/v1/employees", json={**ASHA, "name": "Other Asha"})
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["error_code"], "ENTITY_ALREADY_EXISTS")

    def test_create_employee_missing_field_400(self):
        payload = {k: v for k, v in ASHA.items() if k != "email"}
        resp = self.client.post("/api/v1/employees", json=payload)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error_code"], "BINDING_FAILURE")

    # --- LIST ---

    def test_list_employees_filters(self):
        asha = self._create()
        ravi = self._create(name="Ravi Kumar", email="ravi@example.com", department="CSE")

        resp = self.client.get("/api/v1/employees")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([e["id"] for e in resp.json()["employees"]], [asha["id"], ravi["id"]])

        resp = self.client.get("/api/v1/employees", params={"department": "CSE"})
        self.assertEqual([e["id"] for e in resp.json()["employees"]], [ravi["id"]])

        resp = self.client.get("/api/v1/employees", params={"name": "sha"})
        self.assertEqual([e["id"] for e in resp.json()["employees"]], [asha["id"]])

        resp = self.client.get("/api/v1/employees", params={"id": str(ravi["id"]), "department": "IT"})
        self.assertEqual(resp.json(), {"employees": []})

    def test_list_employees_empty_params_ignored(self):
        self._create()
        resp = self.client.get("/api/v1/employees?id=&name=&department=")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.json()["employees"]), 1)

    def test_list_employees_unknown_department_404(self):
        resp = self.client.get("/api/v1/employees", params={"department": "BIO"})
        self.assertEqual(resp.status_code, 404)

    def test_list_employees_non_numeric_id_400(self):
        resp = self.client.get("/api/v1/employees", params={"id": "abc"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error_code"], "INVALID_PARAMETER")

    # --- GET /{id} ---

    def test_get_employee_200(self):
        created = self._create()
        resp = self.client.get(f"/api/v1/employees/{created['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), created)

    def test_get_employee_404(self):
        resp = self.client.get("/api/v1/employees/999")
        self.assertEqual(resp.status_code, 404)

    def test_get_employee_bad_id_400(self):
        resp = self.client.get("/api/v1/employees/abc")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error_code"], "BINDING_FAILURE")

    # --- PUT /{id} ---

    def test_update_employee_partial(self):
        created = self._create()
        resp = self.client.put(
            f"/api/v1/employees/{created['id']}",
            json={"city": "Mysuru", "major": "", "department": "CSE", "email": "asha@example.com"},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["city"], "Mysuru")
        self.assertEqual(body["major"], "Computer Science")
        self.assertEqual(body["department"], "CSE")
        self.assertEqual(body["name"], "Asha Rao")

    def test_update_employee_email_taken_409(self):
        self._create()
        ravi = self._create(name="Ravi Kumar", email="ravi@example.com")
        resp = self.client.put(f"/api/v1/employees/{ravi['id']}", json={"email": "asha@example.com"})
        self.assertEqual(resp.status_code, 409)

    def test_update_employee_missing_department_404(self):
        created = self._create()
        resp = self.client.put(f"/api/v1/employees/{created['id']}", json={"department": "EEE"})
        self.assertEqual(resp.status_code, 404)

    def test_update_employee_empty_body_400(self):
        created = self._create()
        resp = self.client.put(f"/api/v1/employees/{created['id']}", json={})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error_code"], "INVALID_PARAMETER")

    def test_update_employee_404(self):
        resp = self.client.put("/api/v1/employees/999", json={"city": "Pune"})
        self.assertEqual(resp.status_code, 404)

    # --- DELETE /{id} ---

    def test_delete_employee_soft_deletes(self):
        created = self._create()
        url = f"/api/v1/employees/{created['id']}"

        resp = self.client.delete(url)
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), {"message": "Employee deleted successfully"})

        self.assertEqual(self.client.get(url).status_code, 404)
        self.assertEqual(self.client.delete(url).status_code, 404)
        self.assertEqual(self.client.get("/api/v1/employees").json(), {"employees": []})

    def test_delete_department_with_only_deleted_employees_conflicts(self):
        created = self._create()
        self.client.delete(f"/api/v1/employees/{created['id']}")

        # the service count ignores deleted rows; the foreign key still holds
        resp = self.client.delete("/api/v1/departments/IT")
        self.assertEqual(resp.status_code, 409, resp.text)
        self.assertEqual(resp.json(), {
            "detail": "Constraint violation while deleting department",
            "error_code": "CONSTRAINT_VIOLATION",
        })
        self.assertEqual(self.client.get("/api/v1/departments/IT").status_code, 200)


if __name__ == "__main__":
    unittest.main()
