import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_insight.matching import calculate_overall_score, match_job  # noqa: E402
from resume_insight.matching.job_matcher import calculate_experience_match  # noqa: E402
from resume_insight.schemas import ExperienceEntry, StructuredProfile  # noqa: E402
from resume_insight.scoring.utils import round_half_up  # noqa: E402
from resume_insight.vocabulary import get_vocabulary  # noqa: E402

BACKEND_JD = (
    "Looking for a Backend Developer with 3+ years of experience in Node.js, MongoDB, "
    "and REST API design, strong team collaboration skills required"
)


def _profile(skills=None, roles=0):
    return StructuredProfile(
        name="Jane",
        skills=skills or [],
        experience=[ExperienceEntry(title=f"Developer {index}") for index in range(roles)],
    )


class BackendJobMatchTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.resume_text = "Jane Doe\nNode.js developer\nAcme\nWorked in a team on JavaScript apps. Team player."
        cls.result = match_job(_profile(["Node.js", "JavaScript"], roles=1), BACKEND_JD, resume_text=cls.resume_text)

    def test_skill_sets(self):
        self.assertEqual(self.result.matched_skills, ["Node.js"])
        self.assertIn("MongoDB", self.result.missing_skills)
        self.assertIn("REST API", self.result.missing_skills)
        # "mongodb" contains "go", so the Go skill is requested by this JD.
        self.assertEqual(self.result.missing_skills, ["Go", "MongoDB", "REST API"])

    def test_keywords(self):
        self.assertEqual([(hit.keyword, hit.count) for hit in self.result.matched_keywords], [("team", 2)])
        self.assertEqual(self.result.missing_keywords, ["collaboration", "backend"])

    def test_scores(self):
        scores = self.result.match_scores
        self.assertEqual(scores.skills, 25)
        # 3 years required and a single role falls through to the "some experience" tier.
        self.assertEqual(scores.experience, 75)
        self.assertEqual(scores.keywords, 33)
        self.assertEqual(scores.overall, 45)

    def test_recommendations_priority_and_cap(self):
        recommendations = self.result.recommendations
        self.assertEqual(len(recommendations), 5)
        self.assertTrue(recommendations[0].startswith("Your match score is below 70%"))
        self.assertEqual(recommendations[1], "Add these 3 missing skills: Go, MongoDB, REST API")
        self.assertEqual(recommendations[2], "Incorporate these keywords: collaboration, backend")
        self.assertNotIn("Customize your professional summary to align with the job requirements", recommendations)

    def test_rule_based_result_has_no_advisory_insights(self):
        self.assertIsNone(self.result.advisory_insights)
        self.assertFalse(self.result.advisory_powered)

    def test_wire_format_uses_camel_case(self):
        dumped = self.result.model_dump(by_alias=True)
        self.assertIn("matchScores", dumped)
        self.assertIn("matchedKeywords", dumped)
        self.assertIn("advisoryPowered", dumped)


class SkillAsymmetryTests(unittest.TestCase):
    def test_matched_and_missing_are_not_complements(self):
        result = match_job(_profile(["JavaScript"]), "Java and JavaScript developer")
        self.assertEqual(result.matched_skills, ["JavaScript"])
        self.assertEqual(result.missing_skills, [])
        self.assertEqual(result.match_scores.skills, 50)

    def test_more_matched_profile_skills_than_job_skills_is_capped(self):
        result = match_job(_profile(["Java", "JavaScript"]), "Senior Java engineer")
        self.assertEqual(result.matched_skills, ["Java", "JavaScript"])
        self.assertEqual(result.match_scores.skills, 100)

    def test_reported_skills_come_from_vocabulary(self):
        vocab = get_vocabulary()
        result = match_job(_profile(["Python", "Docker"]), "Python, Kubernetes and Docker on AWS")
        self.assertTrue(all(skill in vocab.skills for skill in result.missing_skills))
        self.assertTrue(all(skill in vocab.skills for skill in result.matched_skills))


class ExperienceTierTests(unittest.TestCase):
    def test_no_years_in_job_description(self):
        self.assertEqual(calculate_experience_match(_profile(roles=1), "Python role"), 85)
        self.assertEqual(calculate_experience_match(_profile(), "Python role"), 60)

    def test_year_tiers(self):
        cases = [
            ("1 year of experience", 1, 90),
            ("4 years of experience", 2, 90),
            ("4 years of experience", 1, 75),
            ("7+ years of experience", 3, 85),
            ("7+ years of experience", 2, 75),
            ("2 YEARS", 0, 50),
        ]
        for jd_text, roles, expected in cases:
            with self.subTest(jd=jd_text, roles=roles):
                self.assertEqual(calculate_experience_match(_profile(roles=roles), jd_text), expected)


class KeywordCountTests(unittest.TestCase):
    def test_occurrences_are_counted_case_insensitively(self):
        result = match_job(_profile(), "cloud deployment", resume_text="Cloud cloud CLOUD deployment")
        self.assertEqual([(hit.keyword, hit.count) for hit in result.matched_keywords], [("cloud", 3), ("deployment", 1)])
        self.assertEqual(result.match_scores.keywords, 100)


class OverallScoreTests(unittest.TestCase):
    def test_weighted_formula(self):
        for skills, experience, keywords in [(0, 0, 0), (100, 100, 100), (25, 75, 33), (50, 85, 10), (33, 90, 67)]:
            expected = round_half_up(skills * 0.4 + experience * 0.35 + keywords * 0.25)
            self.assertEqual(calculate_overall_score(skills, experience, keywords), expected)

    def test_empty_inputs_stay_in_range(self):
        result = match_job(StructuredProfile(), "", resume_text="")
        scores = result.match_scores
        self.assertEqual((scores.skills, scores.keywords, scores.experience), (0, 0, 60))
        self.assertEqual(scores.overall, 21)
        self.assertEqual(result.recommendations[0], "Your match score is below 70% - consider adding missing skills and keywords")


if __name__ == "__main__":
    unittest.main()
