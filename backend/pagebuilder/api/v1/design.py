from flask import jsonify

from pagebuilder.domain.rules import get_rules
from pagebuilder.domain.sections import SECTION_TYPES
from pagebuilder.domain.templates import create_section
from pagebuilder.normalizers.section import normalize_section
from . import v1_bp


@v1_bp.route("/design/rules", methods=["GET"])
def design_rules():
    return jsonify({
        "sectionTypes": list(SECTION_TYPES),
        "rules": get_rules(),
    })


@v1_bp.route("/design/sections/<section_type>/template", methods=["GET"])
def section_template(section_type):
    return jsonify(normalize_section(create_section(section_type)))
