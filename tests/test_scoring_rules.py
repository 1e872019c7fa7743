import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_insight.parsing import extract_profile  # noqa: E402
from resume_insight.schemas import EducationEntry, ExperienceEntry, StructuredProfile  # noqa: E402
from resume_insight.scoring import (  # noqa: E402
    calculate_ats_score,
    calculate_resume_score,
    calculate_skill_match,
    score_profile,
)
from resume_insight.scoring.utils import round_half_up  # noqa: E402

SAMPLE_RESUME = (
    "Jane Doe\n"
    "jane.doe@example.com\n"
    "(555) 123-4567\n"
    "Senior Software Engineer\n"
    "Acme Corp\n"
    "Developer\n"
    "Globex\n"
    "Skills: Python, React, Docker, AWS, SQL, Git\n"
    "Bachelor of Science in Computer Science\n"
    "State University 2015\n"
    "AWS Certified Cloud Practitioner\n"
)


class AtsScoreTests(unittest.TestCase):
    def test_empty_resume_scores_base_values(self):
        profile = extract_profile("")
        self.assertEqual(calculate_ats_score("", profile), 60)
        self.assertEqual(calculate_resume_score(profile), 50)

    def test_whitespace_only_resume_keeps_layout_bonus(self):
        profile = extract_profile("\n\n")
        self.assertEqual(calculate_ats_score("\n\n", profile), 65)
        self.assertEqual(calculate_ats_score(" ", StructuredProfile()), 65)

    def test_full_resume_is_clamped_to_100(self):
        profile = extract_profile(SAMPLE_RESUME)
        self.assertEqual(calculate_ats_score(SAMPLE_RESUME, profile), 100)
        self.assertEqual(calculate_resume_score(profile), 100)

    def test_pipe_layout_artifact_loses_clean_layout_bonus(self):
        text = "John Smith | john@example.com\nPython developer\n"
        profile = extract_profile(text)
        # 60 base + 5 email + 2 skills + 10 experience, no layout bonus
        self.assertEqual(calculate_ats_score(text, profile), 77)
        self.assertEqual(calculate_resume_score(profile), 60)

    def test_mis_encoded_arrow_loses_clean_layout_bonus(self):
        profile = StructuredProfile(name="Jane")
        self.assertEqual(calculate_ats_score("Jane\nâ†’ shipped things", profile), 60)
        self.assertEqual(calculate_ats_score("Jane\n- shipped things", profile), 65)

    def test_skill_bonus_is_capped(self):
        profile = StructuredProfile(skills=[f"Skill {index}" for index in range(15)])
        self.assertEqual(calculate_ats_score("Jane", profile), 85)


class ResumeScoreTests(unittest.TestCase):
    def test_tiers(self):
        profile = StructuredProfile(
            skills=["Python", "Java", "Go", "Rust", "SQL"],
            experience=[ExperienceEntry(title="Dev")] * 3,
            education=[EducationEntry(degree="B.S.")],
        )
        # 50 + 10 skills + 15 experience + 10 education
        self.assertEqual(calculate_resume_score(profile), 85)

    def test_contact_bonus_needs_email_and_phone(self):
        self.assertEqual(calculate_resume_score(StructuredProfile(email="a@b.co")), 50)
        self.assertEqual(calculate_resume_score(StructuredProfile(email="a@b.co", phone="5551234567")), 60)


class SkillMatchTests(unittest.TestCase):
    def test_known_roles(self):
        skills = ["Python", "React", "SQL", "AWS", "Docker", "Git"]
        self.assertEqual(calculate_skill_match(skills, "backend-developer"), 29)
        self.assertEqual(calculate_skill_match(skills, "devops-engineer"), 57)

    def test_unknown_role_defaults_to_75(self):
        self.assertEqual(calculate_skill_match(["Python"], "astronaut"), 75)
        self.assertEqual(calculate_skill_match([], ""), 75)
        self.assertEqual(calculate_skill_match([], None), 75)

    def test_rounding_is_half_up(self):
        # 1 of 8 fullstack skills is 12.5%
        self.assertEqual(calculate_skill_match(["React"], "fullstack-developer"), 13)

    def test_substring_containment_is_case_insensitive(self):
        self.assertEqual(calculate_skill_match(["javascript"], "frontend-developer"), 14)

    def test_score_profile_bundles_all_scores(self):
        profile = extract_profile(SAMPLE_RESUME)
        scores = score_profile(SAMPLE_RESUME, profile, "backend-developer")
        self.assertEqual((scores.ats_score, scores.resume_score, scores.skill_match), (100, 100, 29))
        dumped = scores.model_dump(by_alias=True)
        self.assertEqual(set(dumped), {"atsScore", "resumeScore", "skillMatch"})

    def test_scores_stay_in_range_for_edge_inputs(self):
        for text in ("", " ", "|", "a" * 1000, SAMPLE_RESUME * 10):
            profile = extract_profile(text)
            for score in (
                calculate_ats_score(text, profile),
                calculate_resume_score(profile),
                calculate_skill_match(profile.skills, "software-engineer"),
            ):
                self.assertGreaterEqual(score, 0)
                self.assertLessEqual(score, 100)


class RoundingTests(unittest.TestCase):
    def test_round_half_up(self):
        self.assertEqual(round_half_up(12.5), 13)
        self.assertEqual(round_half_up(44.5), 45)
        self.assertEqual(round_half_up(44.49), 44)
        self.assertEqual(round_half_up(0), 0)


if __name__ == "__main__":
    unittest.main()
