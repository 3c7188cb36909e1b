"""Catalogue statique des archétypes de richesse et des étoiles reconnues.

Objectif du module
------------------
- Déclarer les 4 archétypes (ordre de déclaration = ordre de départage des égalités).
- Déclarer, pour chaque étoile reconnue, sa contribution à chaque archétype et ses
  recommandations de carrière.

Les tables sont construites une fois à l'import et ne sont jamais modifiées.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict

from ziwei_report.domain.vocabulary import normalize_marker_name


class ArchetypeKey(str, Enum):
    """Archétypes de richesse, dans l'ordre de déclaration du catalogue."""

    INVESTMENT_BRAIN = "investment_brain"
    BRANDING_MAGNET = "branding_magnet"
    STRATEGY_PLANNER = "strategy_planner"
    COLLABORATOR = "collaborator"


ARCHETYPE_ORDER: tuple[ArchetypeKey, ...] = tuple(ArchetypeKey)


class CareerRecommendation(BaseModel):
    """Rôle recommandé (ou déconseillé) et sa justification."""

    model_config = ConfigDict(frozen=True)

    role: str
    reason: str


@dataclass(frozen=True)
class ArchetypeInfo:
    label: str
    short_label: str
    description: str
    summary: str
    strengths: tuple[str, ...]
    blind_spots: tuple[str, ...]
    month_theme: str


@dataclass(frozen=True)
class StarArchetypeEntry:
    """Fiche d'une étoile reconnue par l'analyse de richesse."""

    chinese_name: str
    english_name: str
    primary: ArchetypeKey
    scores: Mapping[ArchetypeKey, float]
    money_making_path: str
    as_employee: str
    as_boss: str
    ideal_careers: tuple[CareerRecommendation, ...]
    non_ideal_careers: tuple[CareerRecommendation, ...]
    short_note: str


IB = ArchetypeKey.INVESTMENT_BRAIN
BM = ArchetypeKey.BRANDING_MAGNET
SP = ArchetypeKey.STRATEGY_PLANNER
CO = ArchetypeKey.COLLABORATOR

ARCHETYPES: Mapping[ArchetypeKey, ArchetypeInfo] = MappingProxyType(
    {
        IB: ArchetypeInfo(
            label="Investment Brain",
            short_label="IB",
            description="For those who win by logic, long-term planning, and capital efficiency.",
            summary=(
                "Win through logic, long-term planning, and capital efficiency. Don't chase money "
                "randomly: you want structure, clarity, and control. Build wealth through disciplined "
                "decisions, asset accumulation, and proven systems that last."
            ),
            strengths=(
                "Financial Discipline",
                "Asset Management",
                "Risk Assessment",
                "Cash Flow Control",
                "Long-term Investing",
                "Resource Allocation",
            ),
            blind_spots=("Risk Aversion", "Slow to Adapt", "Over-Caution", "Missing Fast Opportunities"),
            month_theme="Financial Optimization Month",
        ),
        BM: ArchetypeInfo(
            label="Branding Magnet",
            short_label="BM",
            description="For those who monetize visibility, charisma, and social attention.",
            summary=(
                "Monetize visibility, charisma, and social attention. Your brand is your power: the "
                "world pays those who are seen and remembered. Natural ability to attract "
                "opportunities through presence, influence, and magnetic personality."
            ),
            strengths=(
                "Personal Magnetism",
                "Social Influence",
                "Public Speaking",
                "Visibility Creation",
                "Relationship Building",
                "Charismatic Leadership",
            ),
            blind_spots=(
                "Substance over Style",
                "Consistency Challenges",
                "Burnout from Visibility",
                "Over-Extension",
            ),
            month_theme="Brand Building Month",
        ),
        SP: ArchetypeInfo(
            label="Strategy Planner",
            short_label="SP",
            description=(
                "For those who build long-term wealth through systems, foresight, and structured power."
            ),
            summary=(
                "Natural ability to see the big picture and build systematic frameworks for long-term "
                "success. Strong at identifying patterns, anticipating challenges, and creating "
                "actionable roadmaps. Excel in roles requiring vision, structure, and strategic planning."
            ),
            strengths=(
                "Strategic Vision",
                "Systems Thinking",
                "Long-term Focus",
                "Pattern Recognition",
                "Structured Planning",
                "Process Design",
            ),
            blind_spots=("Over-planning", "Analysis Paralysis", "Delegation Challenges", "Perfectionism"),
            month_theme="Systems & Process Month",
        ),
        CO: ArchetypeInfo(
            label="Collaborator",
            short_label="CO",
            description=(
                "Loyal, emotionally intelligent, relationship-based. You win through deep trust and "
                "team power."
            ),
            summary=(
                "Win through deep trust and team power. Not here to do it alone: you shine in "
                "partnerships, service-based roles, and people-oriented paths. Loyal, emotionally "
                "intelligent, and relationship-driven wealth builder."
            ),
            strengths=(
                "Team Coordination",
                "Emotional Intelligence",
                "Loyalty & Trust",
                "Partnership Building",
                "Support Excellence",
                "Relationship Nurturing",
            ),
            blind_spots=("Over-Dependence", "Boundary Issues", "People-Pleasing", "Difficulty Going Solo"),
            month_theme="Networking & Partnerships Month",
        ),
    }
)


def _careers(*pairs: tuple[str, str]) -> tuple[CareerRecommendation, ...]:
    return tuple(CareerRecommendation(role=role, reason=reason) for role, reason in pairs)


def _star(
    chinese_name: str,
    english_name: str,
    primary: ArchetypeKey,
    scores: dict[ArchetypeKey, float],
    path: str,
    employee: str,
    boss: str,
    ideal: tuple[CareerRecommendation, ...],
    non_ideal: tuple[CareerRecommendation, ...],
    note: str,
) -> StarArchetypeEntry:
    return StarArchetypeEntry(
        chinese_name=chinese_name,
        english_name=english_name,
        primary=primary,
        scores=MappingProxyType(scores),
        money_making_path=path,
        as_employee=employee,
        as_boss=boss,
        ideal_careers=ideal,
        non_ideal_careers=non_ideal,
        short_note=note,
    )


_SUPPORT_PATH = "Support + Loyalty: EA, PA, operations coordinator, long-term projects"
_SUPPORT_EMPLOYEE = "Shines as EA, backend manager, operations coordinator, admin lead"
_SUPPORT_BOSS = "Builds through integrity and solid partnership: team-based, long-term alliances"
_WORDS_PATH = "Words + Knowledge: teaching, copywriting, editing, online education"
_WORDS_EMPLOYEE = "Shines as teacher, editor, writer, curriculum developer, marketing content"
_WORDS_BOSS = (
    "Builds knowledge-based IP: online courses, content coaching, editing services, teaching platforms"
)

_STARS: tuple[StarArchetypeEntry, ...] = (
    # Strategy Planner
    _star(
        "紫微", "Zi Wei", SP, {SP: 9.0, BM: 6.5, CO: 5.5, IB: 4.5},
        "Power + Prestige: CEO, public sector, high-end industries",
        "Suits management, luxury brands, leadership roles",
        "Builds high-trust biz: consulting, jewelry, gov-linked",
        _careers(
            ("CEO / Founder", "Natural leadership presence and strategic vision for building premium businesses"),
            ("Management Consultant", "High-level decision making and authority in professional services"),
            ("Public Official", "Thrives in government roles requiring structure and respect"),
            ("Luxury Brand Manager", "Manages elite teams and holds premium standards"),
            ("Strategy Director", "Leadership aura and ability to move entire strategy forward"),
        ),
        _careers(
            ("Cashier / Retail Associate", "Too small and chaotic for your leadership energy"),
            ("Data Entry Clerk", "No authority or team to lead, beneath your capability"),
            ("Basic Admin Assistant", "Your strategic mind needs complex challenges, not repetitive tasks"),
        ),
        "Leadership presence and systematic thinking for long-term empire building",
    ),
    _star(
        "廉贞", "Lian Zhen", SP, {SP: 8.5, CO: 7.0, IB: 5.5, BM: 4.0},
        "Structure + SOP: admin, HR, operations",
        "Fits backend ops, planning, online systems",
        "Builds SOP biz: agencies, HR firms, system teams",
        _careers(
            ("Operations Manager", "Thrives organizing backend systems and creating efficient workflows"),
            ("HR Director", "Excels at building clear SOPs and managing team structures"),
            ("Project Manager", "Strong at step-by-step planning with defined responsibilities"),
            ("Systems Administrator", "Turns chaos into structure through systematic processes"),
            ("Agency Operations Lead", "Ensures everything runs on time and budget with no chaos"),
        ),
        _careers(
            ("Startup Founder (No System)", "Vague, messy environments with no structure will drive you crazy"),
            ("Freelance Creative", "Too unstructured and unpredictable for your SOP-driven mind"),
            ("Fast-Paced Sales Floor", "Prefers clear processes over last-minute chaos"),
        ),
        "Backend efficiency expert who transforms chaos into scalable systems",
    ),
    _star(
        "天机", "Tian Ji", SP, {SP: 9.0, BM: 6.0, IB: 5.0, CO: 4.5},
        "Brain + Ideas: research, design, strategy",
        "Suits R&D, branding, creative roles",
        "Builds idea-based biz: coaching, tech, frameworks",
        _careers(
            ("Brand Strategist", "Your insight and planning ability creates winning market positioning"),
            ("R&D Director", "Space to think deeply and design innovative solutions"),
            ("Creative Director", "Combines strategic thinking with creative frameworks"),
            ("Tech Product Designer", "Builds tools and systems others use to grow"),
            ("Strategy Consultant", "Provides the smarter way to do things through frameworks"),
        ),
        _careers(
            ("Assembly Line Worker", "Your brain needs thinking space, not just repetitive action"),
            ("Manual Labor", "All body, no brain: wastes your strategic gift"),
            ("Telemarketing Script Reader", "No space for your ideas or strategic input"),
        ),
        "Strategic mind that outthinks rather than outhustles for wealth creation",
    ),
    _star(
        "天梁", "Tian Liang", SP, {SP: 8.0, CO: 7.5, IB: 6.5, BM: 4.0},
        "Wisdom + Care: long-term, service-based industries",
        "Fits government, healthcare, stocks, wellness",
        "Builds stable biz: healing, insurance, guidance",
        _careers(
            ("Financial Advisor", "Long-term planning and trusted guidance for client wealth"),
            ("Civil Service Officer", "Stable, structured environment for purposeful work"),
            ("Healthcare Administrator", "Provides care and stability in healing industries"),
            ("Stock Planner", "Long-term perspective and disciplined strategy for investments"),
            ("Wellness Coach", "Builds trust-based relationships that last for years"),
        ),
        _careers(
            ("Day Trader", "Requires quick, instinctive decisions rather than long-term wisdom"),
            ("Fast Money Schemes", "You're built for lasting legacy, not get-rich-quick gambles"),
            ("High-Pressure Sales", "Pushy tactics conflict with your trust-building approach"),
        ),
        "Wise advisor energy that builds trust-based wealth over decades",
    ),
    # Investment Brain
    _star(
        "武曲", "Wu Qu", IB, {IB: 9.0, SP: 6.0, CO: 4.0, BM: 3.5},
        "Numbers + Structure: finance, auditing, metal-related industries",
        "Strong in roles like accountant, finance analyst, risk control",
        "Builds cash flow-based business: trading, loan ops, investment platform",
        _careers(
            ("CFO / Finance Director", "Natural money instinct and tight control over cashflow"),
            ("Accountant / Auditor", "Disciplined with numbers and spots money leaks before others notice"),
            ("Risk Manager", "Knows when to walk away and when something's worth it"),
            ("Logistics Manager", "Controls structure and budget without needing to do delivery"),
            ("Investment Analyst", "Results-oriented approach to evaluating financial opportunities"),
        ),
        _careers(
            ("Event Entertainer", "Requires flashy performance, not your serious execution style"),
            ("Motivational Speaker", "You believe in plans that work, not empty manifestation talk"),
            ("Social Media Influencer", "Too much talk, not enough tangible results for your taste"),
        ),
        "Financial discipline and money instinct for structured wealth accumulation",
    ),
    _star(
        "天府", "Tian Fu", IB, {IB: 8.5, SP: 7.0, CO: 6.0, BM: 4.0},
        "Assets + Stability: property, logistics, and long-term careers",
        "Suits civil service, property sales, or admin-based work",
        "Runs real estate team, logistics biz, or structured MLM business",
        _careers(
            ("Property Investor", "Slow and steady asset accumulation is your natural path"),
            ("Civil Servant", "Clear SOPs, fixed income, and long-term stability suit you"),
            ("Logistics Director", "Building systems that run long-term even when you're not around"),
            ("Real Estate Agent", "Asset-based industry with structured plans and growth"),
            ("Operations Manager", "Process-driven work where you build foundations"),
        ),
        _careers(
            ("Crypto Day Trader", "Fast money and big risks conflict with your stable nature"),
            ("Startup Hustler", "You need clear systems, not chaotic experimentation"),
            ("High-Risk Speculator", "Your wealth comes from holding assets, not gambling on volatility"),
        ),
        "Asset builder who stacks wealth slowly through stability and structure",
    ),
    _star(
        "太阴", "Tai Yin", IB, {IB: 8.0, BM: 7.0, CO: 6.5, SP: 5.0},
        "Emotion + Cashflow Driven: beauty, wellness, property",
        "Fits roles in skincare, travel, feminine retails, real estate",
        "Builds soft-power biz: beauty, retreats, rental property, women-led brands",
        _careers(
            ("Beauty Business Owner", "Soft power attracts loyal female customers through emotion"),
            ("Wellness Center Manager", "Creates calm environments where trust and care drive income"),
            ("Property Rental Manager", "Long-term cashflow through emotional connection and service"),
            ("Boutique Travel Agent", "Makes people feel safe and special, leading to repeat bookings"),
            ("Skincare Brand Founder", "Builds relationship-based business in female market"),
        ),
        _careers(
            ("Aggressive Sales Closer", "You attract through softness, not force or pressure"),
            ("High-Pressure Trading Floor", "Loud and fast-paced chaos drains your gentle energy"),
            ("Construction Foreman", "Too rough and direct for your nurturing approach"),
        ),
        "Soft power that turns care, connection, and property into steady cashflow",
    ),
    # Branding Magnet
    _star(
        "贪狼", "Tan Lang", BM, {BM: 9.5, CO: 6.5, SP: 5.0, IB: 4.5},
        "Charm + Expression: luxury sales, metaphysics, performing, hosting",
        "Shines in luxury retail, event work, metaphysical services, influencer marketing",
        "Builds vibe-based brands: personal brand, metaphysical biz, premium service offers",
        _careers(
            ("Luxury Sales Consultant", "Your charm and energy close deals without hard selling"),
            ("Feng Shui Consultant", "People book you for your vibe, not just the advice"),
            ("Event Emcee / Host", "You are the product: your presence is the brand"),
            ("Influencer / KOL", "Your magnetic personality naturally attracts opportunities"),
            ("High-End Service Provider", "Client-facing roles where your charm becomes the marketing"),
        ),
        _careers(
            ("Backend Operations", "You need to be seen and expressive, not hidden in systems"),
            ("Data Entry", "Boring, repetitive work kills your creative and social energy"),
        ),
        "Natural charisma that makes you the vibe people pay for",
    ),
    _star(
        "巨门", "Ju Men", BM, {BM: 9.0, SP: 6.5, CO: 6.0, IB: 4.0},
        "Speaking + Trust: webinars, coaching, sales, education",
        "Shines as closer, coach, webinar host, lawyer, or trust-based sales",
        "Builds talk-based brands: online programs, speaking, coaching frameworks",
        _careers(
            ("Webinar Closer", "Your clear explanation without hype makes people nod and buy"),
            ("Coach / Trainer", "Logic and structure in your words create trust and conversion"),
            ("Lawyer", "Your mouth is your weapon: you convince through calm clarity"),
            ("Sales Trainer", "You teach others to talk properly and close with trust"),
            ("Online Educator", "No dancing or hype needed: your words do the selling"),
        ),
        _careers(
            ("Branding-Only Role", "You need to speak and explain, not just look good"),
            ("Programmer", "Your gift is communication, not silent code-writing"),
        ),
        "Master communicator who sells by talking right, not talking more",
    ),
    _star(
        "太阳", "Tai Yang", BM, {BM: 9.0, SP: 7.0, CO: 5.5, IB: 4.5},
        "Visibility + Influence: law, politics, trending brands, energy sector",
        "Fits branding, PR, legal, government-linked or high-status industries",
        "Builds impact-driven business: law firm, public brand, leadership platform",
        _careers(
            ("PR Director", "Natural authority and presence that commands respect"),
            ("Lawyer", "Leadership and public-facing roles where status matters"),
            ("Brand Ambassador", "People trust and follow you just by showing up"),
            ("Political Leader", "Leads from the front with visibility and influence"),
            ("Energy Sector Executive", "High-impact industries where you're seen as No.1"),
        ),
        _careers(
            ("Admin Clerk", "You're made to lead, not hide in behind-the-scenes tasks"),
            ("Behind-the-Scenes Tech", "Your power comes from being visible, not hidden"),
        ),
        "Natural leader whose presence and authority pull people in automatically",
    ),
    _star(
        "七杀", "Qi Sha", BM, {BM: 8.5, IB: 6.0, SP: 5.5, CO: 4.0},
        "Action + Risk: military, police, surgery, rescue, trading",
        "Shines in army, police, surgery, trading, or crisis-response roles",
        "Builds fast-action businesses: security firms, ops teams, trading houses",
        _careers(
            ("Crisis Trader", "Performs best under pressure with sharp decision-making"),
            ("Surgeon", "Calm under pressure, cuts clean when others panic"),
            ("Police / Army Officer", "High-risk, high-reward environment suits your intensity"),
            ("Security Firm Owner", "Fast action and bold moves in professional enforcement"),
            ("Emergency Response Lead", "You get in, settle the task, and move on efficiently"),
        ),
        _careers(
            ("Desk Job", "Too slow and boring for your action-oriented nature"),
            ("Slow Planner", "You move first and adjust later; meetings drain you"),
        ),
        "Bold enforcer who acts fast with calculated precision under pressure",
    ),
    _star(
        "破军", "Po Jun", BM, {BM: 8.5, IB: 5.5, CO: 5.0, SP: 4.5},
        "Rebuild + Hands-On: renovation, logistics, warehouse, delivery",
        "Shines in warehouse ops, renovation crew, delivery rider, construction",
        "Builds physical businesses: renovation teams, container/lorry biz, hardware",
        _careers(
            ("Renovation Contractor", "Smash old walls and rebuild better, stronger, more valuable"),
            ("Logistics Boss", "Hands dirty but every delivery earns solid cash"),
            ("Warehouse Manager", "Likes doing and fixing things yourself from scratch"),
            ("Delivery Service Owner", "Movement, structure, and rebuilding generates income"),
            ("Heavy Construction Lead", "Gritty, physical, practical work with real results"),
        ),
        _careers(
            ("Office Politics Role", "You need to move and build, not sit and strategize"),
            ("Soft Sales", "Your power is in action and rebuilding, not gentle persuasion"),
        ),
        "Rebel rebuilder who transforms chaos into stronger foundations through action",
    ),
    # Collaborator
    _star(
        "天同", "Tian Tong", CO, {CO: 9.0, IB: 6.0, SP: 5.0, BM: 4.5},
        "Peace + Comfort: wellness, F&B, lifestyle, customer care",
        "Fits hospitality, service desk, wellness, food, retail",
        "Builds chill, people-first business: cafes, boutique brands, community spaces",
        _careers(
            ("Café Owner", "Nothing flashy but people return for the calm, real vibe"),
            ("Wellness Reception", "Gentle presence makes clients feel at ease naturally"),
            ("Customer Service Lead", "Handles difficult clients calmly and smoothly"),
            ("Boutique Retail", "Low-pressure environment with loyal regulars"),
            ("Health Product Seller", "Consistent and gentle approach builds trust without hard-selling"),
        ),
        _careers(
            ("High-Pressure Sales", "You don't chase: you let good energy attract naturally"),
            ("Competitive Corporate", "Fighting and competing drains your peaceful nature"),
            ("Aggressive Trading", "Your income flows where comfort grows, not through stress"),
        ),
        "Peaceful presence that creates comfortable spaces where money flows naturally",
    ),
    _star(
        "天相", "Tian Xiang", CO, {CO: 8.5, BM: 7.0, SP: 6.0, IB: 5.0},
        "Grace + Trust: HR, insurance, PR, beauty, relationship-based",
        "Shines in HR, public relations, image consultant, insurance",
        "Builds trust-based businesses: insurance teams, beauty, event companies",
        _careers(
            ("HR Director", "Smooths tension and handles people with diplomatic grace"),
            ("Insurance Advisor", "People refer you repeatedly for your elegant stability"),
            ("PR Consultant", "Polished presence earns trust and represents brands well"),
            ("Image Consultant", "Class and composure make you the stable choice for partnerships"),
            ("Event Manager", "Collaborative approach attracts clients through trust, not force"),
        ),
        _careers(
            ("Warehouse Labor", "Your strength is grace and presentation, not physical work"),
            ("Aggressive Closer", "You earn through elegance, not pressure tactics"),
            ("Chaotic Startup", "You need stable partnerships, not messy experimentation"),
        ),
        "Diplomatic grace that builds wealth through trust and refined partnerships",
    ),
    _star(
        "左辅", "Zuo Fu", CO, {CO: 9.0, SP: 6.5, IB: 5.5, BM: 4.0},
        _SUPPORT_PATH, _SUPPORT_EMPLOYEE, _SUPPORT_BOSS,
        _careers(
            ("Executive Assistant", "The right-hand everyone trusts to hold things together"),
            ("Operations Coordinator", "Quietly makes everything work even when chaos strikes"),
            ("Project Manager", "Provides long-term commitment and patient support"),
            ("Backend Support Lead", "You're the anchor people can't do without"),
            ("Chief of Staff", "Loyalty and detail-orientation make you indispensable"),
        ),
        _careers(
            ("Solo Influencer", "You're built to support teams, not be the face"),
            ("Independent Freelancer", "Your strength comes from collaboration, not isolation"),
            ("Spotlight Performer", "You shine behind the scenes, not in front of the camera"),
        ),
        "Ultimate support pillar that holds teams steady through loyalty and consistency",
    ),
    _star(
        "右弼", "You Bi", CO, {CO: 9.0, SP: 6.5, IB: 5.5, BM: 4.0},
        _SUPPORT_PATH, _SUPPORT_EMPLOYEE, _SUPPORT_BOSS,
        _careers(
            ("Personal Assistant", "Never misses a detail and keeps everything running smoothly"),
            ("Operations Manager", "Quietly ensures the team stays steady when things fall apart"),
            ("Administrative Director", "Long-term commitment and patience create lasting value"),
            ("Support Services Lead", "You're the one everyone trusts to carry the back"),
            ("Partnership Manager", "Builds strong teams and alliances through consistent integrity"),
        ),
        _careers(
            ("Solo Entrepreneur", "Your power comes from supporting others, not going alone"),
            ("Public Speaker", "You don't need the front: you excel at holding the back"),
            ("Celebrity Influencer", "Fame isn't your goal: results and loyalty are"),
        ),
        "Loyal support pillar that anchors success through patient behind-the-scenes work",
    ),
    _star(
        "文曲", "Wen Qu", CO, {CO: 8.5, SP: 7.5, BM: 6.0, IB: 5.0},
        _WORDS_PATH, _WORDS_EMPLOYEE, _WORDS_BOSS,
        _careers(
            ("Online Course Creator", "Turns knowledge into structured income through teaching"),
            ("Copywriter", "Your sharp words make others look good and convert"),
            ("Content Strategist", "Explains complex topics in a way that finally makes sense"),
            ("Curriculum Developer", "Teaches others without being asked: education is your gift"),
            ("Editor / Writer", "Always rewrites things to sound better and clearer"),
        ),
        _careers(
            ("Manual Labor", "Your wealth comes from your brain and words, not physical work"),
            ("Repetitive Assembly", "You need intellectual challenges, not mindless tasks"),
            ("Loud Sales Floor", "You excel at messaging, not high-volume noise"),
        ),
        "Sharp educator who transforms knowledge into income through clear communication",
    ),
    _star(
        "文昌", "Wen Chang", CO, {CO: 8.5, SP: 7.5, BM: 6.0, IB: 5.0},
        _WORDS_PATH, _WORDS_EMPLOYEE, _WORDS_BOSS,
        _careers(
            ("Teacher / Educator", "Rational communication turns complex ideas into clear insights"),
            ("Content Writer", "Your organized mind makes you a natural problem-solver through words"),
            ("Research Analyst", "Precision and intellectual integrity shine in critical thinking roles"),
            ("Framework Designer", "Turns messy concepts into structured, sellable frameworks"),
            ("Marketing Strategist", "Writes the emails and messaging that actually convert"),
        ),
        _careers(
            ("Physical Labor", "Your gift is your brain and articulation, not manual work"),
            ("Chaotic Sales Floor", "You need better messaging, not louder marketing"),
            ("Unstructured Creative", "Your strength is logical structure, not pure improvisation"),
        ),
        "Logical educator who unlocks others' understanding through structured teaching",
    ),
)

STAR_CATALOG: Mapping[str, StarArchetypeEntry] = MappingProxyType({s.chinese_name: s for s in _STARS})


def get_star_entry(name: str) -> StarArchetypeEntry | None:
    """Fiche d'une étoile (graphies traditionnelles repliées), ou None si non reconnue."""
    return STAR_CATALOG.get(normalize_marker_name(name))


def is_recognized_star(name: str) -> bool:
    return normalize_marker_name(name) in STAR_CATALOG


def archetype_label(key: ArchetypeKey) -> str:
    return ARCHETYPES[key].label
