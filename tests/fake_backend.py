"""
In-memory stand-in for the Career Portfolio REST API.

Served to the client through httpx.ASGITransport, so requests go through
the real event hooks and envelope handling. Records are stored the way the
backend returns them: camelCase dicts.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
import json

from fastapi import APIRouter, Body, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

VALID_TOKEN = "test-token"
PASSWORD = "secret-password"


class InjectedFailure(Exception):
    def __init__(self, status_code: int, error: Optional[str]):
        self.status_code = status_code
        self.error = error


def ok(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class FakeBackend:
    def __init__(self):
        self.applications: Dict[str, dict] = {}
        self.projects: Dict[str, dict] = {}
        self.resumes: Dict[str, dict] = {}
        self.interviews: Dict[str, dict] = {}
        self.notifications: Dict[str, dict] = {}
        self.flags: Dict[str, bool] = {"analytics": True, "proEntitlements": True}
        self.templates: List[dict] = [
            {"id": "modern", "name": "Modern", "description": "Clean layout", "category": "professional"},
            {"id": "mono", "name": "Mono", "description": "Plain text feel", "category": "minimal"},
        ]
        self.users: List[dict] = [
            {"id": "u1", "email": "jane@example.com", "firstName": "Jane", "role": "USER", "isActive": False},
        ]
        self.profile: Optional[dict] = {"id": "me", "email": "sam@example.com", "firstName": "Sam"}
        self.preferences: Dict[str, bool] = {"emailNotifications": True, "deadlineReminders": True}
        self.test_notifications = 0
        self.system_logs: List[dict] = [
            {"level": "error", "message": "SMTP timeout", "timestamp": "2024-05-01T08:00:00Z"},
        ]
        self.daily_logs: Dict[str, dict] = {}
        self.goals: Dict[str, dict] = {}
        self.achievements: Dict[str, dict] = {}
        self.feedback: Dict[str, dict] = {}
        self.portfolio: Optional[dict] = None
        self.assets: Dict[str, dict] = {}
        self.public_portfolios: Dict[str, dict] = {}
        self.failures: Dict[str, Tuple[int, Optional[str]]] = {}
        self.requests: List[Tuple[str, str, Optional[str]]] = []
        self.last_query: Dict[str, str] = {}
        self._counter = 0

    # --- test helpers ---

    def next_id(self) -> str:
        self._counter += 1
        return str(self._counter)

    def fail(self, route: str, status_code: int = 400, error: Optional[str] = "Validation failed") -> None:
        """Make the next call to `route` fail. error=None sends a non-JSON body."""
        self.failures[route] = (status_code, error)

    def guard(self, route: str) -> None:
        if route in self.failures:
            status_code, error = self.failures.pop(route)
            raise InjectedFailure(status_code, error)

    def add_application(self, **fields) -> dict:
        record = {
            "id": fields.pop("id", None) or self.next_id(),
            "companyName": "Acme",
            "jobTitle": "Backend Engineer",
            "jobUrl": "https://acme.example/jobs/1",
            "applicationDate": now_iso(),
            "status": "APPLIED",
            "resumeId": "r1",
            "resume": {"id": "r1", "versionName": "General"},
            "interviews": [],
        }
        record.update(fields)
        self.applications[record["id"]] = record
        return record

    def add_project(self, **fields) -> dict:
        record = {
            "id": fields.pop("id", None) or self.next_id(),
            "title": "Portfolio site",
            "description": "Personal site",
            "techStack": ["python", "react"],
            "startDate": "2024-01-01T00:00:00Z",
            "targetEndDate": "2024-03-01T00:00:00Z",
            "status": "IN_PROGRESS",
            "revenueTracking": False,
            "progress": 40,
            "timeRemaining": 12,
            "isOverdue": False,
        }
        record.update(fields)
        self.projects[record["id"]] = record
        return record

    def add_resume(self, **fields) -> dict:
        record = {
            "id": fields.pop("id", None) or self.next_id(),
            "versionName": "General",
            "templateId": "modern",
            "content": json.dumps({"summary": "Engineer", "skills": {"technical": ["python"], "soft": []}}),
            "isDefault": False,
        }
        record.update(fields)
        self.resumes[record["id"]] = record
        return record

    def add_interview(self, **fields) -> dict:
        record = {
            "id": fields.pop("id", None) or self.next_id(),
            "applicationId": "1",
            "interviewType": "TECHNICAL",
            "scheduledDate": "2024-05-01T15:00:00Z",
            "duration": 60,
            "questionsAsked": "",
            "outcome": "PENDING",
            "application": {"id": "1", "companyName": "Acme", "jobTitle": "Backend Engineer"},
        }
        record.update(fields)
        self.interviews[record["id"]] = record
        return record

    def add_notification(self, **fields) -> dict:
        record = {
            "id": fields.pop("id", None) or self.next_id(),
            "type": "DEADLINE_REMINDER",
            "title": "Deadline approaching",
            "message": "Portfolio site is due in 3 days",
            "isRead": False,
            "createdAt": now_iso(),
        }
        record.update(fields)
        self.notifications[record["id"]] = record
        return record

    def add_goal(self, **fields) -> dict:
        record = {
            "id": fields.pop("id", None) or self.next_id(),
            "title": "Ship side project",
            "type": "weekly",
            "targetValue": 10,
            "currentValue": 0,
            "unit": "hours",
            "startDate": "2024-05-01T00:00:00Z",
            "endDate": "2024-05-08T00:00:00Z",
            "status": "ACTIVE",
            "priority": "MEDIUM",
        }
        record.update(fields)
        self.goals[record["id"]] = record
        return record

    def add_feedback(self, **fields) -> dict:
        record = {
            "id": fields.pop("id", None) or self.next_id(),
            "type": "ENCOURAGEMENT",
            "title": "Nice streak",
            "message": "Three days of coding in a row",
            "priority": "MEDIUM",
            "isRead": False,
        }
        record.update(fields)
        self.feedback[record["id"]] = record
        return record

    def add_asset(self, **fields) -> dict:
        record = {
            "id": fields.pop("id", None) or self.next_id(),
            "portfolioId": "p1",
            "type": "image",
            "filename": "shot.png",
            "originalName": "Screenshot.png",
            "mimeType": "image/png",
            "size": 2048,
            "url": "/uploads/shot.png",
            "order": 0,
        }
        record.update(fields)
        self.assets[record["id"]] = record
        return record

    def project_progress(self, record: dict) -> dict:
        return {
            "projectId": record["id"],
            "title": record["title"],
            "status": record["status"],
            "progress": record["progress"],
            "timeRemaining": record["timeRemaining"],
            "isOverdue": record["isOverdue"],
            "daysUntilDeadline": -3 if record["isOverdue"] else record["timeRemaining"],
            "completionRate": record["progress"] / 100,
        }

    @staticmethod
    def newest_first(records: Dict[str, dict]) -> List[dict]:
        return list(reversed(list(records.values())))


def not_found(label: str) -> JSONResponse:
    return JSONResponse({"success": False, "error": f"{label} not found"}, status_code=404)


def build_app(backend: FakeBackend) -> FastAPI:
    app = FastAPI()
    api = APIRouter(prefix="/api")

    @app.middleware("http")
    async def record_and_authenticate(request: Request, call_next):
        auth = request.headers.get("authorization")
        backend.requests.append((request.method, request.url.path, auth))
        backend.last_query = dict(request.query_params)
        public = "/auth/" in request.url.path or "/portfolio/public/" in request.url.path
        if not public and auth != f"Bearer {VALID_TOKEN}":
            return JSONResponse(
                {"success": False, "error": {"code": "UNAUTHORIZED", "message": "Access token required"}},
                status_code=401,
            )
        return await call_next(request)

    @app.exception_handler(InjectedFailure)
    async def injected_failure(request: Request, exc: InjectedFailure):
        if exc.error is None:
            return PlainTextResponse("Internal Server Error", status_code=exc.status_code)
        return JSONResponse({"success": False, "error": exc.error}, status_code=exc.status_code)

    # --- auth ---

    @api.post("/auth/login")
    async def login(payload: Dict[str, Any] = Body(...)):
        if payload.get("password") != PASSWORD:
            return JSONResponse({"success": False, "error": "Invalid credentials"}, status_code=401)
        user = {"id": "me", "email": payload["email"], "firstName": "Sam"}
        return ok({"user": user, "token": VALID_TOKEN})

    @api.post("/auth/register")
    async def register(payload: Dict[str, Any] = Body(...)):
        user = {"id": "me", "email": payload["email"], "firstName": payload.get("firstName")}
        return JSONResponse(ok({"user": user, "token": VALID_TOKEN}), status_code=201)

    def signed_in(request: Request) -> bool:
        return request.headers.get("authorization") == f"Bearer {VALID_TOKEN}"

    @api.get("/auth/profile")
    async def profile(request: Request):
        if not signed_in(request):
            return JSONResponse({"success": False, "error": "Access token required"}, status_code=401)
        return ok({"user": backend.profile} if backend.profile else None)

    @api.put("/auth/profile")
    async def update_profile(request: Request, payload: Dict[str, Any] = Body(...)):
        if not signed_in(request):
            return JSONResponse({"success": False, "error": "Access token required"}, status_code=401)
        backend.guard("auth.profile")
        backend.profile.update(payload)
        return ok(backend.profile)

    # --- applications ---

    @api.get("/applications")
    async def list_applications(request: Request):
        backend.guard("applications.list")
        params = request.query_params
        records = backend.newest_first(backend.applications)
        if params.get("status"):
            records = [r for r in records if r["status"] == params["status"]]
        if params.get("companyName"):
            records = [r for r in records if params["companyName"].lower() in r["companyName"].lower()]
        if params.get("search"):
            term = params["search"].lower()
            records = [r for r in records if term in r["companyName"].lower() or term in r["jobTitle"].lower()]
        return ok(records)

    @api.get("/applications/analytics")
    async def application_analytics():
        backend.guard("applications.analytics")
        by_status: Dict[str, int] = {}
        for r in backend.applications.values():
            by_status[r["status"]] = by_status.get(r["status"], 0) + 1
        total = len(backend.applications)
        offers = by_status.get("OFFER", 0)
        return ok({
            "totalApplications": total,
            "applicationsByStatus": by_status,
            "applicationsByMonth": {"2024-05": total},
            "averageTimeToResponse": 6.5,
            "successRate": (offers / total * 100) if total else 0,
            "topCompanies": [{"companyName": "Acme", "count": total}],
        })

    @api.get("/applications/follow-up")
    async def applications_follow_up():
        backend.guard("applications.follow_up")
        return ok([r for r in backend.newest_first(backend.applications) if r.get("followUpDate")])

    @api.get("/applications/{app_id}")
    async def get_application(app_id: str):
        backend.guard("applications.get")
        if app_id not in backend.applications:
            return not_found("Application")
        return ok(backend.applications[app_id])

    @api.post("/applications")
    async def create_application(payload: Dict[str, Any] = Body(...)):
        backend.guard("applications.create")
        resume = backend.resumes.get(payload.get("resumeId"), {"id": payload.get("resumeId"), "versionName": "General"})
        record = backend.add_application(
            **payload, resume={"id": resume["id"], "versionName": resume["versionName"]}
        )
        return JSONResponse(ok(record), status_code=201)

    @api.put("/applications/{app_id}")
    async def update_application(app_id: str, payload: Dict[str, Any] = Body(...)):
        backend.guard("applications.update")
        if app_id not in backend.applications:
            return not_found("Application")
        backend.applications[app_id].update(payload)
        return ok(backend.applications[app_id])

    @api.patch("/applications/{app_id}/status")
    async def update_application_status(app_id: str, payload: Dict[str, Any] = Body(...)):
        backend.guard("applications.status")
        if app_id not in backend.applications:
            return not_found("Application")
        backend.applications[app_id]["status"] = payload["status"]
        return ok(backend.applications[app_id])

    @api.post("/applications/{app_id}/notes")
    async def add_application_notes(app_id: str, payload: Dict[str, Any] = Body(...)):
        backend.guard("applications.notes")
        if app_id not in backend.applications:
            return not_found("Application")
        backend.applications[app_id]["notes"] = payload["notes"]
        return ok(backend.applications[app_id])

    @api.delete("/applications/{app_id}")
    async def delete_application(app_id: str):
        backend.guard("applications.delete")
        if backend.applications.pop(app_id, None) is None:
            return not_found("Application")
        return {"success": True, "message": "Application deleted successfully"}

    # --- projects ---

    @api.get("/projects")
    async def list_projects():
        backend.guard("projects.list")
        return ok(backend.newest_first(backend.projects))

    @api.get("/projects/{project_id}")
    async def get_project(project_id: str):
        backend.guard("projects.get")
        if project_id not in backend.projects:
            return not_found("Project")
        return ok(backend.projects[project_id])

    @api.post("/projects")
    async def create_project(payload: Dict[str, Any] = Body(...)):
        backend.guard("projects.create")
        record = backend.add_project(**{"status": "PLANNING", "progress": 0, **payload})
        return JSONResponse(ok(record), status_code=201)

    @api.put("/projects/{project_id}")
    async def update_project(project_id: str, payload: Dict[str, Any] = Body(...)):
        backend.guard("projects.update")
        if project_id not in backend.projects:
            return not_found("Project")
        backend.projects[project_id].update(payload)
        return ok(backend.projects[project_id])

    @api.delete("/projects/{project_id}")
    async def delete_project(project_id: str):
        backend.guard("projects.delete")
        if backend.projects.pop(project_id, None) is None:
            return not_found("Project")
        return {"success": True, "message": "Project deleted successfully"}

    @api.post("/projects/{project_id}/complete")
    async def complete_project(project_id: str):
        backend.guard("projects.complete")
        if project_id not in backend.projects:
            return not_found("Project")
        backend.projects[project_id].update(
            {"status": "COMPLETED", "progress": 100, "actualEndDate": now_iso(), "isOverdue": False}
        )
        return ok(backend.projects[project_id])

    @api.patch("/projects/{project_id}/status")
    async def update_project_status(project_id: str, payload: Dict[str, Any] = Body(...)):
        backend.guard("projects.status")
        if project_id not in backend.projects:
            return not_found("Project")
        backend.projects[project_id]["status"] = payload["status"]
        return ok(backend.projects[project_id])

    # --- resumes ---

    @api.get("/resumes/templates")
    async def list_templates():
        backend.guard("resumes.templates")
        return ok(backend.templates)

    @api.get("/resumes/templates/category/{category}")
    async def templates_by_category(category: str):
        return ok([t for t in backend.templates if t["category"] == category])

    @api.get("/resumes")
    async def list_resumes():
        backend.guard("resumes.list")
        return ok(backend.newest_first(backend.resumes))

    @api.get("/resumes/default")
    async def default_resume():
        return ok(next((r for r in backend.resumes.values() if r["isDefault"]), None))

    @api.get("/resumes/generate/content")
    async def generate_resume_content():
        backend.guard("resumes.generate")
        return ok({
            "personalInfo": {"firstName": "Sam", "lastName": "Lee", "email": "sam@example.com"},
            "summary": "Backend engineer",
            "experience": [],
            "projects": [{"title": "Portfolio site", "technologies": ["python"]}],
            "skills": {"technical": ["python", "sql"], "soft": ["writing"]},
            "education": [],
        })

    @api.get("/resumes/{resume_id}")
    async def get_resume(resume_id: str):
        if resume_id not in backend.resumes:
            return not_found("Resume")
        return ok(backend.resumes[resume_id])

    def _clear_default(keep_id: str) -> None:
        for r in backend.resumes.values():
            if r["id"] != keep_id:
                r["isDefault"] = False

    @api.post("/resumes")
    async def create_resume(payload: Dict[str, Any] = Body(...)):
        backend.guard("resumes.create")
        content = json.dumps(payload.pop("content", {}))
        record = backend.add_resume(**payload, content=content)
        if record["isDefault"]:
            _clear_default(record["id"])
        return JSONResponse(ok(record), status_code=201)

    @api.put("/resumes/{resume_id}")
    async def update_resume(resume_id: str, payload: Dict[str, Any] = Body(...)):
        backend.guard("resumes.update")
        if resume_id not in backend.resumes:
            return not_found("Resume")
        if "content" in payload:
            payload["content"] = json.dumps(payload["content"])
        backend.resumes[resume_id].update(payload)
        if backend.resumes[resume_id]["isDefault"]:
            _clear_default(resume_id)
        return ok(backend.resumes[resume_id])

    @api.delete("/resumes/{resume_id}")
    async def delete_resume(resume_id: str):
        backend.guard("resumes.delete")
        if backend.resumes.pop(resume_id, None) is None:
            return not_found("Resume")
        return {"success": True, "message": "Resume deleted successfully"}

    @api.post("/resumes/{resume_id}/default")
    async def set_default_resume(resume_id: str):
        backend.guard("resumes.default")
        if resume_id not in backend.resumes:
            return not_found("Resume")
        _clear_default(resume_id)
        backend.resumes[resume_id]["isDefault"] = True
        return ok(backend.resumes[resume_id])

    # --- interviews ---

    @api.get("/interviews")
    async def list_interviews(request: Request):
        backend.guard("interviews.list")
        params = request.query_params
        records = backend.newest_first(backend.interviews)
        if params.get("applicationId"):
            records = [r for r in records if r["applicationId"] == params["applicationId"]]
        if params.get("outcome"):
            records = [r for r in records if r["outcome"] == params["outcome"]]
        return ok(records)

    @api.get("/interviews/upcoming")
    async def upcoming_interviews():
        return ok([r for r in backend.newest_first(backend.interviews) if r["outcome"] == "PENDING"])

    @api.get("/interviews/stats")
    async def interview_stats():
        backend.guard("interviews.stats")
        outcomes = [r["outcome"] for r in backend.interviews.values()]
        return ok({
            "total": len(outcomes),
            "upcoming": outcomes.count("PENDING"),
            "completed": len(outcomes) - outcomes.count("PENDING"),
            "passed": outcomes.count("PASSED"),
            "failed": outcomes.count("FAILED"),
            "cancelled": outcomes.count("CANCELLED"),
            "averageDuration": 60,
        })

    @api.get("/interviews/preparation/{company_name}")
    async def preparation_materials(company_name: str):
        return ok({
            "companyInfo": f"{company_name} builds tools for developers",
            "commonQuestions": ["Tell me about yourself"],
            "technicalTopics": ["System design"],
            "behavioralQuestions": ["Describe a conflict"],
        })

    @api.get("/interviews/{interview_id}")
    async def get_interview(interview_id: str):
        if interview_id not in backend.interviews:
            return not_found("Interview")
        return ok(backend.interviews[interview_id])

    @api.post("/interviews")
    async def create_interview(payload: Dict[str, Any] = Body(...)):
        backend.guard("interviews.create")
        record = backend.add_interview(**payload)
        return JSONResponse(ok(record), status_code=201)

    @api.put("/interviews/{interview_id}")
    async def update_interview(interview_id: str, payload: Dict[str, Any] = Body(...)):
        if interview_id not in backend.interviews:
            return not_found("Interview")
        backend.interviews[interview_id].update(payload)
        return ok(backend.interviews[interview_id])

    @api.delete("/interviews/{interview_id}")
    async def delete_interview(interview_id: str):
        if backend.interviews.pop(interview_id, None) is None:
            return not_found("Interview")
        return {"success": True, "message": "Interview deleted successfully"}

    @api.post("/interviews/{interview_id}/feedback")
    async def add_interview_feedback(interview_id: str, payload: Dict[str, Any] = Body(...)):
        if interview_id not in backend.interviews:
            return not_found("Interview")
        backend.interviews[interview_id]["feedback"] = payload["feedback"]
        return ok(backend.interviews[interview_id])

    @api.post("/interviews/{interview_id}/questions")
    async def add_interview_questions(interview_id: str, payload: Dict[str, Any] = Body(...)):
        if interview_id not in backend.interviews:
            return not_found("Interview")
        backend.interviews[interview_id]["questionsAsked"] = payload["questions"]
        return ok(backend.interviews[interview_id])

    @api.put("/interviews/{interview_id}/outcome")
    async def update_interview_outcome(interview_id: str, payload: Dict[str, Any] = Body(...)):
        backend.guard("interviews.outcome")
        if interview_id not in backend.interviews:
            return not_found("Interview")
        backend.interviews[interview_id]["outcome"] = payload["outcome"]
        return ok(backend.interviews[interview_id])

    # --- notifications ---

    @api.get("/notifications")
    async def list_notifications(request: Request):
        backend.guard("notifications.list")
        params = request.query_params
        records = backend.newest_first(backend.notifications)
        unread = [r for r in records if not r["isRead"]]
        if params.get("unreadOnly") == "true":
            records = unread
        limit = int(params.get("limit", 20))
        offset = int(params.get("offset", 0))
        return ok({
            "notifications": records[offset:offset + limit],
            "pagination": {
                "total": len(backend.notifications),
                "unread": len(unread),
                "limit": limit,
                "offset": offset,
            },
        })

    @api.get("/notifications/stats")
    async def notification_stats():
        unread = sum(1 for r in backend.notifications.values() if not r["isRead"])
        return ok({"total": len(backend.notifications), "unread": unread})

    @api.patch("/notifications/read-all")
    async def mark_all_read():
        backend.guard("notifications.read_all")
        for r in backend.notifications.values():
            r["isRead"] = True
        return {"success": True, "message": "All notifications marked as read"}

    @api.patch("/notifications/{notification_id}/read")
    async def mark_read(notification_id: str):
        backend.guard("notifications.read")
        if notification_id not in backend.notifications:
            return not_found("Notification")
        backend.notifications[notification_id]["isRead"] = True
        return {"success": True, "message": "Notification marked as read"}

    @api.delete("/notifications/{notification_id}")
    async def delete_notification(notification_id: str):
        if backend.notifications.pop(notification_id, None) is None:
            return not_found("Notification")
        return {"success": True, "message": "Notification deleted"}

    # --- flags / admin ---

    @api.get("/flags")
    async def get_flags():
        backend.guard("flags")
        return ok(backend.flags)

    @api.get("/admin/system-stats")
    async def system_stats():
        return ok({"totalUsers": len(backend.users), "totalApplications": len(backend.applications)})

    @api.get("/admin/users")
    async def admin_users():
        backend.guard("admin.users")
        return ok(backend.users)

    @api.put("/admin/users/{user_id}/activate")
    async def activate_user(user_id: str):
        for user in backend.users:
            if user["id"] == user_id:
                user["isActive"] = True
                return {"success": True, "message": "User activated"}
        return not_found("User")

    @api.get("/admin/performance-metrics")
    async def performance_metrics():
        backend.guard("admin.metrics")
        return ok({"averageResponseTime": 120, "requestsPerMinute": 42})

    @api.get("/admin/system-logs")
    async def system_logs():
        return ok(backend.system_logs)

    def find_user(user_id: str) -> Optional[dict]:
        return next((u for u in backend.users if u["id"] == user_id), None)

    @api.put("/admin/users/{user_id}")
    async def update_user(user_id: str, payload: Dict[str, Any] = Body(...)):
        backend.guard("admin.update_user")
        user = find_user(user_id)
        if user is None:
            return not_found("User")
        user.update(payload)
        return ok(user)

    @api.put("/admin/users/{user_id}/deactivate")
    async def deactivate_user(user_id: str):
        user = find_user(user_id)
        if user is None:
            return not_found("User")
        user["isActive"] = False
        return {"success": True, "message": "User deactivated"}

    @api.put("/admin/users/{user_id}/delete")
    async def delete_user(user_id: str):
        user = find_user(user_id)
        if user is None:
            return not_found("User")
        backend.users.remove(user)
        return {"success": True, "message": "User deleted"}

    # --- notification settings ---

    @api.post("/notifications/test")
    async def send_test_notification():
        backend.test_notifications += 1
        record = backend.add_notification(type="TEST", title="Test notification")
        return ok(record)

    @api.get("/notifications/preferences")
    async def get_preferences():
        return ok(backend.preferences)

    @api.put("/notifications/preferences")
    async def update_preferences(payload: Dict[str, Any] = Body(...)):
        backend.guard("notifications.preferences")
        backend.preferences.update(payload)
        return ok(backend.preferences)

    # --- motivation ---

    @api.post("/motivation/daily-log")
    async def log_daily_activity(payload: Dict[str, Any] = Body(...)):
        backend.guard("motivation.daily_log")
        existing = next((log for log in backend.daily_logs.values() if log["date"] == payload["date"]), None)
        if existing is not None:
            existing.update(payload)
            return ok(existing)
        record = {"id": backend.next_id(), **payload}
        backend.daily_logs[record["id"]] = record
        return JSONResponse(ok(record), status_code=201)

    @api.get("/motivation/daily-logs")
    async def daily_logs(request: Request):
        start, end = request.query_params["startDate"], request.query_params["endDate"]
        return ok([log for log in backend.daily_logs.values() if start <= log["date"] <= end])

    @api.post("/motivation/goals")
    async def create_goal(payload: Dict[str, Any] = Body(...)):
        backend.guard("motivation.goals")
        record = backend.add_goal(**payload)
        return JSONResponse(ok(record), status_code=201)

    @api.get("/motivation/goals")
    async def active_goals():
        return ok([g for g in backend.goals.values() if g["status"] == "ACTIVE"])

    @api.get("/motivation/goals/{goal_id}")
    async def get_goal(goal_id: str):
        if goal_id not in backend.goals:
            return not_found("Goal")
        return ok(backend.goals[goal_id])

    @api.put("/motivation/goals/{goal_id}/progress")
    async def update_goal_progress(goal_id: str, payload: Dict[str, Any] = Body(...)):
        backend.guard("motivation.progress")
        if goal_id not in backend.goals:
            return not_found("Goal")
        goal = backend.goals[goal_id]
        goal["currentValue"] = payload["currentValue"]
        if goal["currentValue"] >= goal["targetValue"]:
            goal["status"] = "COMPLETED"
        return ok(goal)

    @api.delete("/motivation/goals/{goal_id}")
    async def delete_goal(goal_id: str):
        if backend.goals.pop(goal_id, None) is None:
            return not_found("Goal")
        return {"success": True, "message": "Goal deleted"}

    @api.get("/motivation/achievements")
    async def achievements():
        return ok(list(backend.achievements.values()))

    @api.post("/motivation/achievements")
    async def check_achievements():
        unlocked = []
        if backend.daily_logs and "first-log" not in backend.achievements:
            record = {"id": "first-log", "title": "First log", "description": "Logged a day", "type": "STREAK"}
            backend.achievements[record["id"]] = record
            unlocked.append(record)
        return ok(unlocked)

    @api.get("/motivation/feedback")
    async def unread_feedback():
        backend.guard("motivation.feedback")
        return ok([f for f in backend.feedback.values() if not f["isRead"]])

    @api.patch("/motivation/feedback/{feedback_id}/read")
    async def mark_feedback_read(feedback_id: str):
        if feedback_id not in backend.feedback:
            return not_found("Feedback")
        backend.feedback[feedback_id]["isRead"] = True
        return ok(backend.feedback[feedback_id])

    def progress_stats() -> dict:
        logs = list(backend.daily_logs.values())
        return {
            "totalCodingHours": sum(log["codingMinutes"] for log in logs) / 60,
            "totalApplications": sum(log["applicationsSubmitted"] for log in logs),
            "currentStreak": len(logs),
            "goalsActive": sum(1 for g in backend.goals.values() if g["status"] == "ACTIVE"),
            "moodTrend": "stable",
        }

    @api.get("/motivation/stats")
    async def motivation_stats():
        return ok(progress_stats())

    @api.get("/motivation/guidance")
    async def guidance():
        return ok([{"id": "g1", "type": "STRATEGY", "title": "Apply wider", "message": "Try two new companies"}])

    @api.get("/motivation/dashboard")
    async def motivation_dashboard():
        backend.guard("motivation.dashboard")
        return ok({
            "stats": progress_stats(),
            "activeGoals": [g for g in backend.goals.values() if g["status"] == "ACTIVE"],
            "achievements": list(backend.achievements.values()),
            "unreadFeedback": [f for f in backend.feedback.values() if not f["isRead"]],
            "guidance": [],
            "recentLogs": list(backend.daily_logs.values()),
        })

    # --- portfolio ---

    @api.get("/portfolio")
    async def get_portfolio():
        backend.guard("portfolio.get")
        return ok(backend.portfolio)

    @api.post("/portfolio")
    async def save_portfolio(payload: Dict[str, Any] = Body(...)):
        backend.guard("portfolio.save")
        if backend.portfolio is None:
            backend.portfolio = {
                "id": "p1", "userId": "me", "title": "My work", "theme": "modern",
                "isPublic": False, "analyticsEnabled": False,
            }
        backend.portfolio.update(payload)
        return ok(backend.portfolio)

    @api.post("/portfolio/generate")
    async def generate_portfolio(payload: Dict[str, Any] = Body(...)):
        projects = list(backend.projects.values())
        if payload.get("includeCompletedProjects", True):
            projects = [p for p in projects if p["status"] == "COMPLETED"]
        portfolio = backend.portfolio or {}
        backend.portfolio = {**portfolio, "lastGenerated": now_iso()} if portfolio else None
        return ok({
            "user": {"firstName": "Sam", "lastName": "Lee", "email": "sam@example.com"},
            "portfolio": {"title": portfolio.get("title", ""), "theme": payload.get("theme", "modern")},
            "projects": projects,
            "resume": {"content": {}} if payload.get("includeResume", True) else None,
            "seo": {},
            "analytics": payload.get("includeAnalytics", False),
        })

    @api.put("/portfolio/seo")
    async def update_seo(payload: Dict[str, Any] = Body(...)):
        if backend.portfolio is None:
            return not_found("Portfolio")
        backend.portfolio.update(payload)
        return ok(backend.portfolio)

    @api.put("/portfolio/visibility")
    async def toggle_visibility():
        backend.guard("portfolio.visibility")
        if backend.portfolio is None:
            return not_found("Portfolio")
        backend.portfolio["isPublic"] = not backend.portfolio["isPublic"]
        return ok(backend.portfolio)

    @api.get("/portfolio/assets/{portfolio_id}")
    async def portfolio_assets(portfolio_id: str):
        return ok([a for a in backend.assets.values() if a["portfolioId"] == portfolio_id])

    @api.post("/portfolio/assets")
    async def add_portfolio_asset(payload: Dict[str, Any] = Body(...)):
        backend.guard("portfolio.assets")
        record = backend.add_asset(**payload)
        return JSONResponse(ok(record), status_code=201)

    @api.delete("/portfolio/assets/{asset_id}")
    async def delete_portfolio_asset(asset_id: str):
        backend.guard("portfolio.delete_asset")
        if backend.assets.pop(asset_id, None) is None:
            return not_found("Asset")
        return {"success": True, "message": "Asset deleted"}

    @api.get("/portfolio/analytics")
    async def portfolio_analytics():
        return ok({
            "totalViews": 12,
            "uniqueVisitors": 5,
            "pageViews": {"/": 9, "/projects": 3},
            "referrers": {"linkedin.com": 4},
            "recentViews": [{"id": "v1", "page": "/", "timestamp": "2024-05-02T10:00:00Z"}],
        })

    @api.get("/portfolio/public/{user_id}")
    async def public_portfolio(user_id: str):
        record = backend.public_portfolios.get(user_id)
        if record is None or not record.get("isPublic"):
            return not_found("Portfolio")
        return ok(record)

    @api.get("/portfolio/public/{user_id}/content")
    async def public_portfolio_content(user_id: str):
        record = backend.public_portfolios.get(user_id)
        if record is None or not record.get("isPublic"):
            return not_found("Portfolio")
        return ok({"user": {"firstName": "Ada"}, "portfolio": {"title": record["title"]}, "projects": []})

    # --- time tracking ---

    def open_projects() -> List[dict]:
        return [p for p in backend.newest_first(backend.projects) if p["status"] != "COMPLETED"]

    @api.get("/time-tracking/projects/progress")
    async def all_project_progress():
        backend.guard("time.progress")
        return ok([backend.project_progress(p) for p in backend.newest_first(backend.projects)])

    @api.get("/time-tracking/projects/{project_id}/progress")
    async def project_progress(project_id: str):
        if project_id not in backend.projects:
            return not_found("Project")
        return ok(backend.project_progress(backend.projects[project_id]))

    @api.get("/time-tracking/deadlines")
    async def deadlines():
        backend.guard("time.deadlines")
        result = []
        for p in open_projects():
            if p["isOverdue"]:
                urgency = "critical"
            elif p["timeRemaining"] <= 3:
                urgency = "high"
            elif p["timeRemaining"] <= 7:
                urgency = "medium"
            else:
                urgency = "low"
            result.append({
                "projectId": p["id"],
                "title": p["title"],
                "daysUntilDeadline": p["timeRemaining"],
                "isOverdue": p["isOverdue"],
                "urgency": urgency,
            })
        return ok(result)

    @api.get("/time-tracking/timeline")
    async def timeline():
        projects = backend.newest_first(backend.projects)
        return ok({
            "labels": [p["title"] for p in projects],
            "progress": [p["progress"] for p in projects],
            "deadlines": [p["targetEndDate"] for p in projects],
            "overdue": [p["isOverdue"] for p in projects],
        })

    @api.get("/time-tracking/stats")
    async def time_tracking_stats():
        projects = list(backend.projects.values())
        return ok({
            "totalProjects": len(projects),
            "completedProjects": sum(1 for p in projects if p["status"] == "COMPLETED"),
            "inProgressProjects": sum(1 for p in projects if p["status"] == "IN_PROGRESS"),
            "overdueProjects": sum(1 for p in projects if p["isOverdue"]),
            "averageProgress": sum(p["progress"] for p in projects) / len(projects) if projects else 0,
            "upcomingDeadlines": sum(1 for p in open_projects() if not p["isOverdue"]),
        })

    @api.post("/time-tracking/update-statuses")
    async def update_statuses():
        backend.guard("time.update_statuses")
        for p in open_projects():
            if p["targetEndDate"] < now_iso():
                p["isOverdue"] = True
        return {"success": True, "message": "Project statuses updated"}

    app.include_router(api)
    return app
