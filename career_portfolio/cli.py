#!/usr/bin/env python3
"""
Career Portfolio - Command line client

Sign in and work with applications, projects, resumes and interviews from
a terminal. Successful changes print the same confirmation toasts the web
client shows; failures print the store's error and exit non-zero.

Usage:
    career-portfolio login user@example.com --password secret
    career-portfolio applications list --status INTERVIEW
    career-portfolio applications status <id> OFFER
    career-portfolio projects complete <id>
    career-portfolio resumes default <id>
    career-portfolio logout
"""
from typing import Iterable, List, Optional
import argparse
import asyncio
import getpass
import sys

from .api.client import ApiError
from .main import CareerPortfolioApp, configure_logging
from .schemas import ApplicationStatus, InterviewOutcome, ProjectStatus


def _print_rows(rows: Iterable[str], empty: str) -> None:
    printed = False
    for row in rows:
        print(row)
        printed = True
    if not printed:
        print(empty)


def _report(app: CareerPortfolioApp, store) -> int:
    """Print toasts and the store error; return the exit code."""
    for toast in app.toasts.toasts:
        print(f"[{toast.severity.value}] {toast.message}")
    app.toasts.clear()
    if store is not None and store.error:
        print(f"Error: {store.error}", file=sys.stderr)
        return 1
    return 0


async def _login(app: CareerPortfolioApp, args) -> int:
    app.navigator.navigate(app.settings.session.login_path)
    password = args.password or getpass.getpass("Password: ")
    try:
        result = await app.auth.login(args.email, password)
    except ApiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Logged in as {result.user.email}")
    return 0


async def _applications(app: CareerPortfolioApp, args) -> int:
    store = app.applications
    if args.action == "list":
        if args.search:
            items = await store.search(args.search)
        else:
            items = await store.fetch_all({"status": args.status} if args.status else None)
        _print_rows(
            (f"{a.id}  {a.status.value:<10} {a.company_name} - {a.job_title}" for a in (items or [])),
            "No applications found."
        )
    elif args.action == "follow-up":
        items = await store.fetch_follow_ups()
        _print_rows(
            (f"{a.id}  {a.company_name}  due in {a.days_until_follow_up()} days" for a in (items or [])),
            "Nothing to follow up."
        )
    elif args.action == "analytics":
        analytics = await store.fetch_analytics()
        if analytics:
            print(f"Total: {analytics.total_applications}  Success rate: {analytics.success_rate_display}")
            for status, count in analytics.applications_by_status.items():
                print(f"  {status:<10} {count}")
    elif args.action == "status":
        await store.fetch_all()
        await store.change_status(args.id, ApplicationStatus(args.value))
    elif args.action == "notes":
        await store.fetch_all()
        await store.save_notes(args.id, args.value)
    elif args.action == "delete":
        await store.fetch_all()
        await store.remove(args.id)
    return _report(app, store)


async def _projects(app: CareerPortfolioApp, args) -> int:
    store = app.projects
    if args.action == "list":
        items = await store.fetch_all()
        _print_rows(
            (
                f"{p.id}  {p.status.value:<11} {p.progress:>3}%  {p.title}"
                + ("  (overdue)" if p.is_overdue else "")
                for p in (items or [])
            ),
            "No projects found."
        )
    elif args.action == "complete":
        await store.complete(args.id)
    elif args.action == "status":
        await store.update_status(args.id, ProjectStatus(args.value))
    elif args.action == "delete":
        await store.delete(args.id)
    return _report(app, store)


async def _resumes(app: CareerPortfolioApp, args) -> int:
    store = app.resumes
    if args.action == "list":
        items = await store.fetch_all()
        _print_rows(
            (f"{r.id}  {'*' if r.is_default else ' '} {r.version_name}" for r in (items or [])),
            "No resumes found."
        )
    elif args.action == "default":
        await store.fetch_all()
        await store.set_default(args.id)
    elif args.action == "delete":
        await store.delete(args.id)
    return _report(app, store)


async def _interviews(app: CareerPortfolioApp, args) -> int:
    store = app.interviews
    if args.action == "upcoming":
        items = await store.fetch_upcoming()
        _print_rows(
            (f"{i.id}  {i.scheduled_date}  {i.interview_type}" for i in (items or [])),
            "No upcoming interviews."
        )
    elif args.action == "outcome":
        await store.update_outcome(args.id, InterviewOutcome(args.value))
    elif args.action == "prep":
        materials = await store.fetch_preparation(args.value)
        if materials:
            print(materials.company_info)
            _print_rows((f"- {q}" for q in materials.common_questions), "")
    return _report(app, store)


async def _notifications(app: CareerPortfolioApp, args) -> int:
    store = app.notifications
    if args.action == "list":
        page = await store.fetch(unread_only=args.unread)
        if page:
            print(f"{store.unread_count} unread of {page.pagination.total}")
            _print_rows(
                (f"{n.id}  {' ' if n.is_read else '!'} {n.title}" for n in page.notifications),
                "No notifications."
            )
    elif args.action == "read-all":
        await store.mark_all_read()
    return _report(app, store)


async def _run(args) -> int:
    async with CareerPortfolioApp(current_path=args.path) as app:
        if args.command == "login":
            return await _login(app, args)
        if args.command == "logout":
            app.auth.logout()
            print("Logged out.")
            return 0
        handlers = {
            "applications": _applications,
            "projects": _projects,
            "resumes": _resumes,
            "interviews": _interviews,
            "notifications": _notifications,
        }
        code = await handlers[args.command](app, args)
        if app.navigator.current_path == app.settings.session.login_path:
            print("Session expired. Run 'career-portfolio login' again.", file=sys.stderr)
            return 1
        return code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="career-portfolio", description="Career Portfolio command line client")
    parser.add_argument("--log-level", default=None, help="Logging level (default from settings)")
    parser.add_argument("--path", default="/dashboard", help=argparse.SUPPRESS)
    sub = parser.add_subparsers(dest="command", required=True)

    login = sub.add_parser("login", help="Sign in and store the session token")
    login.add_argument("email")
    login.add_argument("--password")

    sub.add_parser("logout", help="Forget the stored session token")

    apps = sub.add_parser("applications", help="Job applications")
    apps.add_argument("action", choices=["list", "follow-up", "analytics", "status", "notes", "delete"])
    apps.add_argument("id", nargs="?")
    apps.add_argument("value", nargs="?")
    apps.add_argument("--status", choices=[s.value for s in ApplicationStatus])
    apps.add_argument("--search")

    projects = sub.add_parser("projects", help="Side projects")
    projects.add_argument("action", choices=["list", "complete", "status", "delete"])
    projects.add_argument("id", nargs="?")
    projects.add_argument("value", nargs="?")

    resumes = sub.add_parser("resumes", help="Resume versions")
    resumes.add_argument("action", choices=["list", "default", "delete"])
    resumes.add_argument("id", nargs="?")

    interviews = sub.add_parser("interviews", help="Interviews")
    interviews.add_argument("action", choices=["upcoming", "outcome", "prep"])
    interviews.add_argument("id", nargs="?")
    interviews.add_argument("value", nargs="?")

    notifications = sub.add_parser("notifications", help="Notification center")
    notifications.add_argument("action", choices=["list", "read-all"])
    notifications.add_argument("--unread", action="store_true")

    return parser


def _validate(parser: argparse.ArgumentParser, args) -> None:
    needs_id = {
        "applications": {"status", "notes", "delete"},
        "projects": {"complete", "status", "delete"},
        "resumes": {"default", "delete"},
        "interviews": {"outcome"},
    }
    needs_value = {
        "applications": {"status", "notes"},
        "projects": {"status"},
        "interviews": {"outcome"},
    }
    action = getattr(args, "action", None)
    if action in needs_id.get(args.command, set()) and not args.id:
        parser.error(f"{args.command} {action} requires an id")
    if action in needs_value.get(args.command, set()) and not args.value:
        parser.error(f"{args.command} {action} requires a value")
    if args.command == "interviews" and action == "prep":
        # "prep <company>" takes the company as its only argument
        args.value = args.value or args.id
        if not args.value:
            parser.error("interviews prep requires a company name")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate(parser, args)
    configure_logging(args.log_level)
    try:
        return asyncio.run(_run(args))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
