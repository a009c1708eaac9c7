"""Voice profiles installed by the seed operation."""

from shared.models import VoiceProfileRequest

DEFAULT_VOICE_PROFILES: tuple[VoiceProfileRequest, ...] = (
    VoiceProfileRequest(
        name="Professional Business",
        is_default=True,
        tone=["Professional", "Confident", "Authoritative"],
        audience=["Business Executives", "Stakeholders", "Management"],
        objective=["Inform", "Persuade", "Drive decisions"],
        brand_voice=["Authoritative yet approachable", "Data-driven decisions", "Results oriented"],
        content_style=["Use concrete examples", "Include relevant metrics and KPIs", "Clear actionable insights"],
        restrictions=["Avoid overly technical jargon", "Keep content accessible", "Stay professional"],
        other=["Include call-to-action in conclusions", "Focus on business outcomes"],
    ),
    VoiceProfileRequest(
        name="Educational & Training",
        tone=["Friendly", "Instructional", "Encouraging"],
        audience=["Students", "Learners", "Trainees"],
        objective=["Educate", "Build understanding", "Train"],
        brand_voice=["Supportive teacher", "Encouraging learning", "Patient and helpful"],
        content_style=["Use step-by-step explanations", "Include practical examples", "Use visuals"],
        restrictions=["Avoid overwhelming with information", "Keep it simple", "Stay encouraging"],
        other=["Include interactive elements", "Add knowledge checks", "Provide practice opportunities"],
    ),
    VoiceProfileRequest(
        name="Technical & Scientific",
        tone=["Technical", "Precise", "Analytical"],
        audience=["Technical professionals", "Researchers", "Engineers"],
        objective=["Share technical knowledge", "Present research findings", "Inform"],
        brand_voice=["Expert authority", "Methodical approach", "Accuracy focused"],
        content_style=["Include detailed methodologies", "Technical specifications", "Use data and metrics"],
        restrictions=["Maintain technical accuracy", "Cite sources when appropriate", "Avoid oversimplification"],
        other=["Include technical diagrams", "Detailed appendices", "Reference materials"],
    ),
    VoiceProfileRequest(
        name="Sales & Marketing",
        tone=["Persuasive", "Enthusiastic", "Customer focused"],
        audience=["Potential customers", "Clients", "Prospects"],
        objective=["Persuade", "Drive action", "Sell"],
        brand_voice=["Customer-focused", "Solution-oriented", "Benefits driven"],
        content_style=["Highlight benefits over features", "Use customer success stories", "Include testimonials"],
        restrictions=["Avoid overly promotional language", "Focus on value", "Stay authentic"],
        other=["Include clear next steps", "Contact information", "Call to action"],
    ),
)
