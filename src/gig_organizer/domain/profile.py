"""Organizer and performer profile models."""

from gig_organizer.domain.base import ApiModel


class VatNumber(ApiModel):
    """VAT identifier with its issuing country."""

    number: str
    country: str


class CompanyInfo(ApiModel):
    """Company record attached to business organizers."""

    name: str
    address: str = ""
    vat_number: VatNumber | None = None
    contact_email: str | None = None
    contact_phone: str | None = None


class OrganizerProfile(ApiModel):
    """Profile of the signed-in organizer."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    bio: str | None = None
    location_city: str | None = None
    phone_number: str | None = None
    organizer_type: str | None = None
    company_info: CompanyInfo | None = None
    status: str = "ACTIVE"


class OrganizerStatistics(ApiModel):
    """Aggregates computed by the API for the organizer."""

    total_gigs_created: int = 0
    total_gigs_completed: int = 0
    total_applications_received: int = 0
    average_rating: float | None = None
    total_reviews: int = 0
    total_amount_paid: float = 0.0


class PerformerProfile(ApiModel):
    """Public, read-only performer profile."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    stage_name: str | None = None
    profile_image_url: str | None = None
    genres: list[str] = []
    location: str | None = None
    bio: str | None = None
    average_rating: float | None = None
    total_reviews: int = 0


class SignInResult(ApiModel):
    """Token and profile returned by sign-in."""

    token: str
    organizer: OrganizerProfile | None = None
