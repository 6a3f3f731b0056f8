"""
Profile Routes
==============

Create and list profiles stored in the app database.
"""

from dataclasses import dataclass, field
from typing import Dict

from flask import render_template, request, redirect, url_for, jsonify

from . import profile_bp
from .forms import ProfileInput
from storeadmin.core import admin_required, db, db_log, Profile
from storeadmin.core.boundary import wants_json


@dataclass
class ProfileActionResult:
    errors: Dict[str, str] = field(default_factory=dict)
    values: Dict[str, str] = field(default_factory=dict)
    profile: Profile = None

    @property
    def ok(self):
        return not self.errors


def load_profiles():
    """All profiles, newest first"""
    return Profile.query.order_by(Profile.created_at.desc(), Profile.id.desc()).all()


def submit_profile(profile_input):
    """Validate and persist a profile; nothing is written when validation fails"""
    errors = profile_input.validate()
    if errors:
        return ProfileActionResult(errors=errors, values=profile_input.values())

    profile = Profile(name=profile_input.name, age=profile_input.age_value)
    db.session.add(profile)
    db.session.commit()

    db_log('info', 'profile', f"Profile {profile.id} created", {'name': profile.name})
    return ProfileActionResult(profile=profile)


@profile_bp.route('/profile')
@admin_required
def profile_page(admin):
    """Profile form and saved profiles"""
    return render_template('profile/profile.html',
                           profiles=load_profiles(),
                           errors={},
                           values={})


@profile_bp.route('/profile', methods=['POST'])
@admin_required
def create_profile(admin):
    """Handle the profile form"""
    result = submit_profile(ProfileInput.from_form(request.form))

    if result.ok:
        return redirect(url_for('profile.profile_page'))

    if wants_json():
        return jsonify({'errors': result.errors, 'values': result.values}), 400

    return render_template('profile/profile.html',
                           profiles=load_profiles(),
                           errors=result.errors,
                           values=result.values), 400
