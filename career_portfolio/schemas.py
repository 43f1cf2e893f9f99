"""
Career Portfolio - Pydantic schemas for API records and request payloads.

The backend speaks camelCase JSON; models expose snake_case attributes and
accept either spelling. Records keep unknown fields so nothing the server
sends is lost when a record is cached and shown again.
"""
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union
from enum import Enum
import json


# --- Enums for validated fields ---

class ApplicationStatus(str, Enum):
    APPLIED = "APPLIED"
    SCREENING = "SCREENING"
    INTERVIEW = "INTERVIEW"
    OFFER = "OFFER"
    REJECTED = "REJECTED"
    WITHDRAWN = "WITHDRAWN"


class ProjectStatus(str, Enum):
    PLANNING = "PLANNING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    PAUSED = "PAUSED"


class InterviewOutcome(str, Enum):
    PENDING = "PENDING"
    PASSED = "PASSED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


class ToastSeverity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


# --- Base models ---

class ApiModel(BaseModel):
    """Record returned by the backend."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "allow"


class ApiPayload(BaseModel):
    """Request body sent to the backend."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"

    def to_payload(self) -> Dict[str, Any]:
        """Serialize only the fields the caller actually set."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


# --- Job Application Schemas ---

class ResumeSnapshot(ApiModel):
    id: str
    version_name: str


class InterviewSummary(ApiModel):
    id: str
    interview_type: str
    scheduled_date: Optional[datetime] = None
    outcome: Optional[str] = None


class JobApplication(ApiModel):
    id: str
    company_name: str
    job_title: str
    job_url: Optional[str] = None
    application_date: Optional[datetime] = None
    status: ApplicationStatus = ApplicationStatus.APPLIED
    follow_up_date: Optional[datetime] = None
    notes: Optional[str] = None
    resume_id: Optional[str] = None
    resume: Optional[ResumeSnapshot] = None
    interviews: List[InterviewSummary] = Field(default_factory=list)
    cover_letter: Optional[str] = None
    company_research: Optional[str] = None
    preparation_notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def days_until_follow_up(self, today: Optional[date] = None) -> Optional[int]:
        """Day difference for display; negative means the follow-up is overdue."""
        if self.follow_up_date is None:
            return None
        today = today or date.today()
        return (self.follow_up_date.date() - today).days


class JobApplicationCreate(ApiPayload):
    resume_id: str
    company_name: str = Field(..., min_length=1, max_length=200)
    job_title: str = Field(..., min_length=1, max_length=200)
    job_url: str
    cover_letter: Optional[str] = None
    notes: Optional[str] = None
    follow_up_date: Optional[datetime] = None
    company_research: Optional[str] = None
    preparation_notes: Optional[str] = None


class JobApplicationUpdate(ApiPayload):
    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    job_title: Optional[str] = Field(None, min_length=1, max_length=200)
    job_url: Optional[str] = None
    status: Optional[ApplicationStatus] = None
    cover_letter: Optional[str] = None
    notes: Optional[str] = None
    follow_up_date: Optional[datetime] = None
    company_research: Optional[str] = None
    preparation_notes: Optional[str] = None


class ApplicationFilters(ApiPayload):
    status: Optional[ApplicationStatus] = None
    company_name: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None


class CompanyCount(ApiModel):
    company_name: str
    count: int


class ApplicationAnalytics(ApiModel):
    total_applications: int = 0
    applications_by_status: Dict[str, int] = Field(default_factory=dict)
    applications_by_month: Dict[str, int] = Field(default_factory=dict)
    average_time_to_response: float = 0
    success_rate: float = 0
    top_companies: List[CompanyCount] = Field(default_factory=list)

    @property
    def success_rate_display(self) -> str:
        return f"{self.success_rate:.1f}%"


# --- Project Schemas ---

class Project(ApiModel):
    id: str
    title: str
    description: str = ""
    tech_stack: List[str] = Field(default_factory=list)
    start_date: Optional[datetime] = None
    target_end_date: Optional[datetime] = None
    actual_end_date: Optional[datetime] = None
    status: ProjectStatus = ProjectStatus.PLANNING
    repository_url: Optional[str] = None
    live_url: Optional[str] = None
    revenue_tracking: bool = False
    market_research: Optional[str] = None
    progress: int = Field(0, ge=0, le=100)
    # Signed days; negative means overdue. Both values come from the backend.
    time_remaining: int = 0
    is_overdue: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProjectCreate(ApiPayload):
    title: str = Field(..., min_length=1, max_length=200)
    description: str
    tech_stack: List[str] = Field(default_factory=list)
    start_date: Optional[datetime] = None
    target_end_date: datetime
    status: Optional[ProjectStatus] = None
    repository_url: Optional[str] = None
    live_url: Optional[str] = None
    revenue_tracking: Optional[bool] = None
    market_research: Optional[str] = None


class ProjectUpdate(ApiPayload):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    tech_stack: Optional[List[str]] = None
    start_date: Optional[datetime] = None
    target_end_date: Optional[datetime] = None
    status: Optional[ProjectStatus] = None
    repository_url: Optional[str] = None
    live_url: Optional[str] = None
    revenue_tracking: Optional[bool] = None
    market_research: Optional[str] = None


# --- Resume Schemas ---

class PersonalInfo(ApiModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None


class ExperienceEntry(ApiModel):
    company: str
    position: str
    start_date: str
    end_date: Optional[str] = None
    description: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)


class ResumeProjectEntry(ApiModel):
    title: str
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    repository_url: Optional[str] = None
    live_url: Optional[str] = None


class Skills(ApiModel):
    technical: List[str] = Field(default_factory=list)
    soft: List[str] = Field(default_factory=list)


class EducationEntry(ApiModel):
    institution: str
    degree: str
    field: str = ""
    graduation_date: str = ""
    gpa: Optional[str] = None


class ResumeContent(ApiModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: List[ExperienceEntry] = Field(default_factory=list)
    projects: List[ResumeProjectEntry] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    education: List[EducationEntry] = Field(default_factory=list)


class ResumeTemplate(ApiModel):
    id: str
    name: str
    description: str = ""
    category: Optional[str] = None
    preview: Optional[str] = None


class Resume(ApiModel):
    id: str
    version_name: str
    template_id: Optional[str] = None
    # Stored by the backend as a JSON string; kept opaque here
    content: Any = None
    is_default: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def parsed_content(self) -> Optional[ResumeContent]:
        """Decode content into the structured resume document, if present."""
        if self.content is None or self.content == "":
            return None
        raw = json.loads(self.content) if isinstance(self.content, str) else self.content
        return ResumeContent.model_validate(raw)


class ResumeCreate(ApiPayload):
    version_name: str = Field(..., min_length=1, max_length=200)
    template_id: str
    content: ResumeContent
    is_default: Optional[bool] = None


class ResumeUpdate(ApiPayload):
    version_name: Optional[str] = Field(None, min_length=1, max_length=200)
    template_id: Optional[str] = None
    content: Optional[ResumeContent] = None
    is_default: Optional[bool] = None


# --- Interview Schemas ---

class ApplicationSnapshot(ApiModel):
    id: str
    company_name: str
    job_title: str


class Interview(ApiModel):
    id: str
    application_id: str
    interview_type: str
    scheduled_date: Optional[datetime] = None
    duration: int = 60  # minutes
    interviewer_name: Optional[str] = None
    preparation_notes: Optional[str] = None
    questions_asked: Optional[str] = None
    feedback: Optional[str] = None
    outcome: InterviewOutcome = InterviewOutcome.PENDING
    application: Optional[ApplicationSnapshot] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InterviewCreate(ApiPayload):
    application_id: str
    interview_type: str
    scheduled_date: datetime
    duration: int = Field(60, gt=0, le=600)
    interviewer_name: Optional[str] = None
    preparation_notes: Optional[str] = None


class InterviewUpdate(ApiPayload):
    interview_type: Optional[str] = None
    scheduled_date: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0, le=600)
    interviewer_name: Optional[str] = None
    preparation_notes: Optional[str] = None
    questions_asked: Optional[str] = None
    feedback: Optional[str] = None
    outcome: Optional[InterviewOutcome] = None


class InterviewFilters(ApiPayload):
    application_id: Optional[str] = None
    interview_type: Optional[str] = None
    outcome: Optional[InterviewOutcome] = None
    scheduled_date_from: Optional[date] = None
    scheduled_date_to: Optional[date] = None


class InterviewStats(ApiModel):
    total: int = 0
    upcoming: int = 0
    completed: int = 0
    passed: int = 0
    failed: int = 0
    cancelled: int = 0
    average_duration: float = 0


class PreparationMaterials(ApiModel):
    company_info: str = ""
    common_questions: List[str] = Field(default_factory=list)
    technical_topics: List[str] = Field(default_factory=list)
    behavioral_questions: List[str] = Field(default_factory=list)


# --- Notification Schemas ---

class Notification(ApiModel):
    id: str
    type: Optional[str] = None
    title: str = ""
    message: str = ""
    is_read: bool = False
    created_at: Optional[datetime] = None


class Pagination(ApiModel):
    total: int = 0
    unread: int = 0
    limit: int = 20
    offset: int = 0


class NotificationPage(ApiModel):
    notifications: List[Notification] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


class NotificationStats(ApiModel):
    total: int = 0
    unread: int = 0


# --- Motivation Schemas ---

class GoalType(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


class Priority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class DailyLog(ApiModel):
    id: str
    date: str
    coding_minutes: int = 0
    applications_submitted: int = 0
    learning_minutes: int = 0
    notes: Optional[str] = None
    mood: Optional[str] = None
    energy_level: Optional[int] = None
    productivity: Optional[int] = None
    challenges: Optional[str] = None
    achievements: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DailyLogCreate(ApiPayload):
    date: str
    coding_minutes: int = Field(..., ge=0)
    applications_submitted: int = Field(..., ge=0)
    learning_minutes: int = Field(..., ge=0)
    notes: Optional[str] = None
    mood: Optional[str] = None
    energy_level: Optional[int] = Field(None, ge=1, le=10)
    productivity: Optional[int] = Field(None, ge=1, le=10)
    challenges: Optional[str] = None
    achievements: Optional[str] = None


class Goal(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    type: str = GoalType.CUSTOM.value
    target_value: float = 0
    current_value: float = 0
    unit: str = ""
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: str = "ACTIVE"
    priority: str = Priority.MEDIUM.value

    @property
    def percent_complete(self) -> float:
        if not self.target_value:
            return 0.0
        return min(100.0, self.current_value / self.target_value * 100)


class GoalCreate(ApiPayload):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    type: GoalType
    target_value: float = Field(..., gt=0)
    unit: str
    end_date: datetime
    priority: Optional[Priority] = None


class Achievement(ApiModel):
    id: str
    title: str
    description: str = ""
    type: Optional[str] = None
    icon: Optional[str] = None
    unlocked_at: Optional[datetime] = None
    metadata: Optional[str] = None


class MotivationalFeedback(ApiModel):
    id: str
    type: Optional[str] = None
    title: str = ""
    message: str = ""
    priority: Optional[str] = None
    is_read: bool = False
    expires_at: Optional[datetime] = None


class ProgressStats(ApiModel):
    total_coding_hours: float = 0
    total_applications: int = 0
    total_learning_hours: float = 0
    average_daily_coding: float = 0
    average_daily_applications: float = 0
    average_daily_learning: float = 0
    current_streak: int = 0
    longest_streak: int = 0
    goals_completed: int = 0
    goals_active: int = 0
    achievements_unlocked: int = 0
    mood_trend: Optional[str] = None
    productivity_trend: Optional[str] = None


class MotivationDashboard(ApiModel):
    stats: ProgressStats = Field(default_factory=ProgressStats)
    active_goals: List[Goal] = Field(default_factory=list)
    achievements: List[Achievement] = Field(default_factory=list)
    unread_feedback: List[MotivationalFeedback] = Field(default_factory=list)
    guidance: List[MotivationalFeedback] = Field(default_factory=list)
    recent_logs: List[DailyLog] = Field(default_factory=list)


# --- Portfolio Schemas ---

class Portfolio(ApiModel):
    id: str
    user_id: Optional[str] = None
    title: str = ""
    subtitle: Optional[str] = None
    description: Optional[str] = None
    theme: str = "modern"
    custom_domain: Optional[str] = None
    is_public: bool = False
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    seo_keywords: Optional[str] = None
    analytics_enabled: bool = False
    last_generated: Optional[datetime] = None


class PortfolioUpdate(ApiPayload):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    theme: Optional[str] = None
    custom_domain: Optional[str] = None
    is_public: Optional[bool] = None
    analytics_enabled: Optional[bool] = None


class PortfolioGenerateOptions(ApiPayload):
    include_completed_projects: bool = True
    include_resume: bool = True
    include_analytics: bool = False
    theme: Optional[str] = None


class PortfolioSeo(ApiPayload):
    seo_title: Optional[str] = Field(None, max_length=70)
    seo_description: Optional[str] = Field(None, max_length=160)
    seo_keywords: Optional[str] = None


class PortfolioAsset(ApiModel):
    id: str
    portfolio_id: str
    type: str
    filename: str = ""
    original_name: str = ""
    mime_type: str = ""
    size: int = 0
    url: str = ""
    alt_text: Optional[str] = None
    order: int = 0


class PortfolioAssetCreate(ApiPayload):
    portfolio_id: str
    type: str
    filename: str
    original_name: str
    mime_type: str
    size: int = Field(..., ge=0)
    url: str
    alt_text: Optional[str] = None
    order: Optional[int] = None


class PortfolioView(ApiModel):
    id: str
    page: str = ""
    referrer: Optional[str] = None
    timestamp: Optional[datetime] = None


class PortfolioAnalytics(ApiModel):
    total_views: int = 0
    unique_visitors: int = 0
    page_views: Dict[str, int] = Field(default_factory=dict)
    referrers: Dict[str, int] = Field(default_factory=dict)
    recent_views: List[PortfolioView] = Field(default_factory=list)


class PortfolioContent(ApiModel):
    """Rendered portfolio: owner, project list, resume and SEO block."""
    user: Dict[str, Any] = Field(default_factory=dict)
    portfolio: Dict[str, Any] = Field(default_factory=dict)
    projects: List[Dict[str, Any]] = Field(default_factory=list)
    resume: Optional[Dict[str, Any]] = None
    seo: Dict[str, Any] = Field(default_factory=dict)
    analytics: bool = False


# --- Time Tracking Schemas ---

class DeadlineUrgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ProjectProgress(ApiModel):
    project_id: str
    title: str = ""
    status: ProjectStatus = ProjectStatus.PLANNING
    progress: int = 0
    time_remaining: int = 0
    is_overdue: bool = False
    days_until_deadline: int = 0
    completion_rate: float = 0


class DeadlineNotification(ApiModel):
    project_id: str
    title: str = ""
    days_until_deadline: int = 0
    is_overdue: bool = False
    urgency: DeadlineUrgency = DeadlineUrgency.LOW


class ProjectTimeline(ApiModel):
    labels: List[str] = Field(default_factory=list)
    progress: List[float] = Field(default_factory=list)
    deadlines: List[str] = Field(default_factory=list)
    overdue: List[bool] = Field(default_factory=list)


class TimeTrackingStats(ApiModel):
    total_projects: int = 0
    completed_projects: int = 0
    in_progress_projects: int = 0
    overdue_projects: int = 0
    average_progress: float = 0
    upcoming_deadlines: int = 0


# --- Flags / Auth / Admin Schemas ---

class FeatureFlags(ApiModel):
    analytics: bool = False
    feedback_widget: bool = True
    onboarding_checklist: bool = True
    interview_prep: bool = True
    pro_entitlements: bool = False
    loaded: bool = False


class User(ApiModel):
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None


class AuthResult(ApiModel):
    user: User
    token: str


class RegisterRequest(ApiPayload):
    email: str
    password: str = Field(..., min_length=8)
    first_name: str
    last_name: str
    target_job_title: Optional[str] = None
    job_search_deadline: Optional[date] = None

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v):
        if "@" not in v:
            raise ValueError("Invalid email format")
        return v


class AdminUser(ApiModel):
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None
    is_active: bool = True


class SystemStats(ApiModel):
    """Admin dashboard counters; shape varies by backend version."""


# --- Toasts ---

class ToastMessage(BaseModel):
    id: str
    message: str
    severity: ToastSeverity = ToastSeverity.INFO
    duration_ms: int = 3000


PayloadLike = Union[ApiPayload, Dict[str, Any]]
