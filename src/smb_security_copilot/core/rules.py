from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..models import AnswerSet, Effort, Step

SUITE_MICROSOFT = "Microsoft 365"
SUITE_GOOGLE = "Google Workspace"

# Company sizes at which unmanaged devices become a fleet problem.
MANAGED_FLEET_SIZES = frozenset({"6-15", "16-50", "51-200", "200+"})
REMOTE_WORKFORCE = frozenset({"Some", "Many/Most"})


@dataclass(slots=True, frozen=True)
class Rule:
    id: str
    predicate: Callable[[AnswerSet], bool]
    risk_weight: int
    step_factory: Callable[[AnswerSet], Step]

    def __post_init__(self) -> None:
        if int(self.risk_weight) <= 0:
            raise ValueError(f"Rule {self.id!r} risk weight must be a positive integer.")

    def apply(self, answers: AnswerSet) -> Step | None:
        if not self.predicate(answers):
            return None
        step = self.step_factory(answers)
        if step.id != self.id:
            raise ValueError(f"Rule {self.id!r} produced a step with id {step.id!r}.")
        return step


@dataclass(slots=True, frozen=True)
class RuleOutcome:
    steps: tuple[Step, ...]
    total_risk: int
    triggered: tuple[str, ...]


def answered_other_than(key: str, value: str) -> Callable[[AnswerSet], bool]:
    def _predicate(answers: AnswerSet) -> bool:
        current = answers.get(key)
        return current is not None and current != value

    return _predicate


def answered_one_of(key: str, values: Iterable[str]) -> Callable[[AnswerSet], bool]:
    accepted = frozenset(values)

    def _predicate(answers: AnswerSet) -> bool:
        return answers.get(key) in accepted

    return _predicate


def _by_suite(answers: AnswerSet, *, microsoft: str, google: str, other: str) -> str:
    suite = answers.get("suite")
    if suite == SUITE_MICROSOFT:
        return microsoft
    if suite == SUITE_GOOGLE:
        return google
    return other


def _mfa_step(answers: AnswerSet) -> Step:
    return Step(
        id="mfa",
        title="Enforce MFA for all accounts",
        rationale="Stops most account-takeover attacks.",
        actions=(
            _by_suite(
                answers,
                microsoft="Use Conditional Access in Entra ID to require MFA for all users.",
                google="Turn on 2‑Step Verification for all users in Admin console.",
                other="Use Duo to enforce MFA across various apps.",
            ),
        ),
        category="mfa",
        impact=5,
        effort=Effort.LOW,
    )


def _password_manager_step(answers: AnswerSet) -> Step:
    return Step(
        id="pwdmgr",
        title="Adopt a team password manager",
        rationale="Reduces weak/reused passwords and enables secure sharing.",
        actions=("Create shared vaults; require strong, unique passwords; enable SSO if available.",),
        category="passwordManager",
        impact=4,
        effort=Effort.LOW,
    )


def _endpoint_step(answers: AnswerSet) -> Step:
    return Step(
        id="endpoint",
        title="Deploy endpoint protection on all devices",
        rationale="Blocks malware/ransomware before it spreads.",
        actions=("Roll out a single EDR/AV to all endpoints and monitor alerts weekly.",),
        category="endpoint",
        impact=4,
        # Partial coverage only needs the rollout finished.
        effort=Effort.MEDIUM if answers.get("endpoint") == "No" else Effort.LOW,
    )


def _backup_step(answers: AnswerSet) -> Step:
    return Step(
        id="backup",
        title="Enable automated, offsite backups",
        rationale="Protects from ransomware, device loss, and accidental deletion.",
        actions=("Back up laptops/desktops daily and test restores quarterly.",),
        category="backup",
        impact=5,
        effort=Effort.MEDIUM,
    )


def _email_step(answers: AnswerSet) -> Step:
    return Step(
        id="email",
        title="Add advanced email security",
        rationale="Catches phishing and malicious attachments that defaults miss.",
        actions=(
            _by_suite(
                answers,
                microsoft="Add advanced phishing protection on top of Defender (or third‑party gateway).",
                google="Layer a secure email gateway to improve phishing detection.",
                other="Add a secure email gateway to your mail provider.",
            ),
        ),
        category="emailSecurity",
        impact=3,
        effort=Effort.LOW,
    )


def _vpn_step(answers: AnswerSet) -> Step:
    return Step(
        id="vpn",
        title="Provide secure remote access (VPN/ZTNA)",
        rationale="Encrypts traffic on untrusted networks and limits exposure.",
        actions=("Issue accounts to remote staff; restrict access by user/group.",),
        category="vpn",
        impact=3,
        effort=Effort.LOW,
    )


def _mdm_step(answers: AnswerSet) -> Step:
    return Step(
        id="mdm",
        title="Set up device management (MDM)",
        rationale="Keeps devices patched, enforces disk encryption, allows remote wipe.",
        actions=("Enroll corporate devices; enforce screen lock, updates and encryption.",),
        category="mdm",
        impact=3,
        effort=Effort.MEDIUM,
    )


def _unmanaged_fleet(answers: AnswerSet) -> bool:
    return answers.get("mdm") == "No" and answers.get("employees") in MANAGED_FLEET_SIZES


DEFAULT_RULES: tuple[Rule, ...] = (
    Rule(id="mfa", predicate=answered_other_than("mfa", "All users"), risk_weight=3, step_factory=_mfa_step),
    Rule(id="pwdmgr", predicate=answered_other_than("pwdmgr", "Yes"), risk_weight=2, step_factory=_password_manager_step),
    Rule(id="endpoint", predicate=answered_other_than("endpoint", "All devices"), risk_weight=2, step_factory=_endpoint_step),
    Rule(id="backup", predicate=answered_other_than("backup", "Yes"), risk_weight=3, step_factory=_backup_step),
    Rule(id="email", predicate=answered_other_than("emailsec", "Yes"), risk_weight=1, step_factory=_email_step),
    Rule(id="vpn", predicate=answered_one_of("remote", REMOTE_WORKFORCE), risk_weight=1, step_factory=_vpn_step),
    Rule(id="mdm", predicate=_unmanaged_fleet, risk_weight=1, step_factory=_mdm_step),
)


def ensure_unique_rule_ids(rules: Iterable[Rule]) -> tuple[Rule, ...]:
    ordered = tuple(rules)
    seen: set[str] = set()
    for rule in ordered:
        if rule.id in seen:
            raise ValueError(f"Duplicate rule id: {rule.id!r}")
        seen.add(rule.id)
    return ordered


def evaluate_rules(answers: AnswerSet, rules: Iterable[Rule] = DEFAULT_RULES) -> RuleOutcome:
    """Run every rule against `answers`; steps come back in rule-definition order."""
    steps: list[Step] = []
    triggered: list[str] = []
    total_risk = 0
    for rule in rules:
        step = rule.apply(answers)
        if step is None:
            continue
        steps.append(step)
        triggered.append(rule.id)
        total_risk += int(rule.risk_weight)
    return RuleOutcome(steps=tuple(steps), total_risk=total_risk, triggered=tuple(triggered))
