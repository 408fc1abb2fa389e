import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import jobboard.models  # noqa: F401
from jobboard.core.security import token_service
from jobboard.db.base import Base
from jobboard.db.session import get_db
from jobboard.main import app
from jobboard.models.enums import Role
from jobboard.services.credentials import CredentialStore
from jobboard.services.workflow import WorkflowEngine

JOB_PAYLOAD = {
    "jobTitle": "Backend Engineer",
    "department": "Platform",
    "location": "Remote",
    "employmentType": "Full-time",
    "jobSummary": "Build and run the hiring APIs.",
    "keyResponsibilities": ["Design APIs", "Review code"],
    "requiredQualifications": ["3+ years Python"],
    "companyName": "Acme Corp",
}

RESUME_PAYLOAD = {
    "personalInfo": {"fullName": "Casey Candidate", "email": "casey@example.com"},
    "summary": "Python developer",
    "experience": [{"company": "Initech", "role": "Developer"}],
    "education": [{"school": "State University"}],
    "skills": ["Python", "SQL"],
}


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def credentials(db):
    return CredentialStore(db)


@pytest.fixture()
def workflow(db):
    return WorkflowEngine(db)


@pytest.fixture()
def candidate(credentials):
    return credentials.register("casey", "candidate123", Role.CANDIDATE.value)


@pytest.fixture()
def recruiter(credentials):
    return credentials.register(
        "riley", "recruiter123", Role.RECRUITER.value, {"companyName": "Acme Corp"}
    )


@pytest.fixture()
def admin(credentials):
    return credentials.register("admin", "adminpassword", Role.ADMIN.value)


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_header(user) -> dict:
    return {"x-auth-token": token_service.issue(user.id, user.role)}
