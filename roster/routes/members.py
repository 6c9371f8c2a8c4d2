# =============================================================================
# File: roster/routes/members.py
# Purpose: HTML pages for the member roster (list, new, show, edit, delete).
# =============================================================================
from __future__ import annotations

from flask import (
    Blueprint,
    abort,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    url_for,
)

from roster.errors import MemberNotFound
from roster.models import Member
from roster.services import members as member_service
from roster.store import MemberStore

bp = Blueprint("members", __name__)


def get_store() -> MemberStore:
    """Return the store configured on the running app."""
    return current_app.extensions["member_store"]


def _lookup_or_404(member_id: str) -> Member:
    try:
        return member_service.get_member(get_store(), member_id)
    except MemberNotFound:
        abort(404)


# -----------------------------------------------------------------
# Read
# -----------------------------------------------------------------
@bp.get("")
def index():
    members = member_service.list_members(get_store())
    return render_template("members/index.html", members=members)


@bp.get("/new")
def new():
    return render_template("members/new.html", member=Member(), messages=[])


@bp.get("/<member_id>")
def show(member_id: str):
    member = _lookup_or_404(member_id)
    return render_template("members/show.html", member=member)


@bp.get("/<member_id>/edit")
def edit(member_id: str):
    member = _lookup_or_404(member_id)
    return render_template(
        "members/edit.html", member=member, member_id=member_id, messages=[]
    )


@bp.get("/<member_id>/delete")
def delete(member_id: str):
    member = _lookup_or_404(member_id)
    return render_template("members/delete.html", member=member)


# -----------------------------------------------------------------
# Write
# -----------------------------------------------------------------
@bp.post("")
def create():
    member, result = member_service.create_member(
        get_store(), request.form.get("name")
    )
    if not result.valid:
        return render_template(
            "members/new.html", member=member, messages=result.messages
        )

    flash(f"Successfully saved the new member: {member.name}.")
    return redirect(url_for("members.show", member_id=member.id))


@bp.route("/<member_id>", methods=["PUT", "PATCH"])
def update(member_id: str):
    try:
        member, result = member_service.update_member(
            get_store(), member_id, request.form.get("name")
        )
    except MemberNotFound:
        abort(404)

    if not result.valid:
        return render_template(
            "members/edit.html",
            member=member,
            member_id=member_id,
            messages=result.messages,
        )

    flash(f"Successfully updated the member: {member.name}.")
    return redirect(url_for("members.show", member_id=member.id))


@bp.delete("/<member_id>")
def destroy(member_id: str):
    member_service.remove_member(get_store(), member_id)
    flash(f"Successfully removed the member: {member_id}.")
    return redirect(url_for("members.index"))
