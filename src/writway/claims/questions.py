"""
Ordered question table for the claim questionnaire.

The declaration order is the asking order and follows Form 7A:
eligibility, plaintiff, defendants, amount, remedy.
"""

from dataclasses import dataclass

from writway.models.api import QuestionDescriptor, QuestionOption, QuestionType


@dataclass(frozen=True)
class FieldQuestion:
    """Maps one dotted claim field to the question that fills it."""

    field: str
    question_id: str
    type: QuestionType
    label: str
    required: bool = True
    description: str | None = None
    options: tuple[tuple[str, str], ...] | None = None  # (label, value)

    def to_descriptor(self) -> QuestionDescriptor:
        return QuestionDescriptor(
            id=self.question_id,
            field=self.field,
            type=self.type,
            label=self.label,
            description=self.description,
            required=self.required,
            options=(
                [QuestionOption(label=label, value=value) for label, value in self.options]
                if self.options
                else None
            ),
        )


FIELD_QUESTIONS: tuple[FieldQuestion, ...] = (
    # === ELIGIBILITY ===
    FieldQuestion(
        field="eligibility.totalAmount",
        question_id="q-eligibility-amount",
        type="number",
        label="What is the total amount you are claiming (including any interest or costs)?",
    ),
    FieldQuestion(
        field="eligibility.isAmountUnder35000",
        question_id="q-eligibility-under-35k",
        type="boolean",
        label="Is the amount $35,000 or less?",
    ),
    FieldQuestion(
        field="eligibility.isBasedInOntario",
        question_id="q-eligibility-ontario",
        type="boolean",
        label="Is your claim based in Ontario?",
        description="The transaction or event happened here or the Defendant is located here",
    ),
    FieldQuestion(
        field="eligibility.issueDate",
        question_id="q-eligibility-date",
        type="date",
        label="When did the issue happen?",
    ),
    FieldQuestion(
        field="eligibility.claimType",
        question_id="q-eligibility-type",
        type="select",
        label="Is this about money owed, property returned, or damages for a loss?",
        options=(
            ("Money owed", "money"),
            ("Property returned", "property"),
            ("Damages for a loss", "damages"),
        ),
    ),
    # === PLAINTIFF ===
    FieldQuestion(
        field="plaintiff.fullName",
        question_id="q-plaintiff-name",
        type="text",
        label="Please enter your full legal name",
    ),
    FieldQuestion(
        field="plaintiff.filingType",
        question_id="q-plaintiff-type",
        type="select",
        label="Are you filing as an individual, business, or organization?",
        options=(
            ("Individual", "individual"),
            ("Business", "business"),
            ("Organization", "organization"),
        ),
    ),
    FieldQuestion(
        field="plaintiff.address",
        question_id="q-plaintiff-address",
        type="text",
        label="Street address",
    ),
    FieldQuestion(
        field="plaintiff.city",
        question_id="q-plaintiff-city",
        type="text",
        label="City",
    ),
    FieldQuestion(
        field="plaintiff.province",
        question_id="q-plaintiff-province",
        type="text",
        label="Province",
    ),
    FieldQuestion(
        field="plaintiff.postalCode",
        question_id="q-plaintiff-postal",
        type="text",
        label="Postal code",
    ),
    FieldQuestion(
        field="plaintiff.phone",
        question_id="q-plaintiff-phone",
        type="text",
        label="Phone number",
    ),
    FieldQuestion(
        field="plaintiff.email",
        question_id="q-plaintiff-email",
        type="text",
        label="Email",
    ),
    FieldQuestion(
        field="plaintiff.hasRepresentative",
        question_id="q-plaintiff-rep",
        type="boolean",
        label="Do you have a representative (paralegal, lawyer, or agent)?",
    ),
    # === DEFENDANTS ===
    FieldQuestion(
        field="defendants.count",
        question_id="q-defendant-count",
        type="number",
        label="How many defendants are there?",
    ),
    # === AMOUNT ===
    FieldQuestion(
        field="amount.principalAmount",
        question_id="q-amount-principal",
        type="number",
        label="What is the principal amount you are claiming?",
    ),
    FieldQuestion(
        field="amount.claimingInterest",
        question_id="q-amount-interest",
        type="boolean",
        label="Are you claiming interest?",
    ),
    FieldQuestion(
        field="amount.claimingCosts",
        question_id="q-amount-costs",
        type="boolean",
        label="Are you claiming court filing costs or service fees?",
    ),
    FieldQuestion(
        field="amount.claimingDamages",
        question_id="q-amount-damages",
        type="boolean",
        label="Are you claiming any additional damages?",
        description="e.g., inconvenience, property damage, or lost income",
    ),
    # === REMEDY ===
    FieldQuestion(
        field="remedy.payMoney",
        question_id="q-remedy-pay",
        type="boolean",
        label="Are you asking the court to order payment of money?",
        required=False,
    ),
    FieldQuestion(
        field="remedy.returnProperty",
        question_id="q-remedy-property",
        type="boolean",
        label="Are you asking the court to order return of property?",
        required=False,
    ),
    FieldQuestion(
        field="remedy.performObligation",
        question_id="q-remedy-obligation",
        type="boolean",
        label="Are you asking the court to order performance of an obligation?",
        required=False,
    ),
)


def all_field_paths() -> list[str]:
    """Every field path in asking order."""
    return [q.field for q in FIELD_QUESTIONS]


def required_field_paths() -> list[str]:
    return [q.field for q in FIELD_QUESTIONS if q.required]


def get_question(field_path: str) -> FieldQuestion | None:
    """Get the question for a field path, or None if it is not asked."""
    for question in FIELD_QUESTIONS:
        if question.field == field_path:
            return question
    return None
