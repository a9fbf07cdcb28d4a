# nextmove/domain/branding_defaults.py
"""
Default branding template.

Every field a branding-aware page can render must exist here: the merge in
``nextmove.services.branding.merge`` only fills in keys that this template
declares.
"""

from __future__ import annotations

import copy
from typing import Any, Dict

# Sections merged key-by-key over the defaults. ``pages`` is handled one
# level deeper through PAGE_SECTIONS.
MERGED_SECTIONS = (
    "pwa",
    "images",
    "content",
    "hero",
    "stats",
    "features",
    "howItWorks",
    "testimonials",
    "cta",
    "footer",
    "social_media",
    "seo",
    "documents",
)

PAGE_SECTIONS = ("about", "contact", "privacy")


DEFAULT_BRANDING: Dict[str, Any] = {
    "platform_name": "NextMove Cargo",
    "logo_url": "https://via.placeholder.com/150x50?text=NextMove",
    "logo_nexus_url": "https://via.placeholder.com/50x50?text=N",
    "favicon_url": "https://via.placeholder.com/32x32",
    "primary_color": "#2563eb",
    "secondary_color": "#1e40af",
    "accent_color": "#f59e0b",
    "font_family": "Inter, sans-serif",
    "custom_css": "",
    "images": {
        "login_background": "https://images.unsplash.com/photo-1586528116311-ad8dd3c8310d?ixlib=rb-1.2.1&auto=format&fit=crop&w=1350&q=80",
        "sidebar_background": "https://images.unsplash.com/photo-1578575437130-527eed3abbec?ixlib=rb-1.2.1&auto=format&fit=crop&w=1350&q=80",
    },
    "content": {
        "welcome_title": "Bienvenue sur NextMove Cargo",
        "welcome_message": "Gérez vos importations en toute simplicité.",
        "login_title": "Connexion",
        "login_subtitle": "Accédez à votre espace sécurisé",
        "footer_text": "NextMove Cargo - Votre partenaire logistique de confiance.",
    },
    "hero": {
        "title": "Simplifiez vos Importations de la Chine vers l'Afrique",
        "subtitle": "Une plateforme tout-en-un pour gérer vos expéditions, sécuriser vos paiements et suivre vos marchandises en temps réel.",
        "cta1": "Demander une cotation",
        "cta2": "Comment ça marche",
        "badge1": "Paiement Sécurisé",
        "badge2": "Livraison en 72h",
        "badge3": "50+ Villes Couvertes",
    },
    "stats": {
        "shipments": "Expéditions",
        "value": "Valeur Marchandise",
        "forwarders": "Transitaires",
        "success": "Taux de Succès",
    },
    "features": {
        "title": "Pourquoi choisir NextMove ?",
        "subtitle": "Des outils conçus pour sécuriser et accélérer votre business",
        "description": "Nous combinons technologie et expertise logistique pour vous offrir une expérience d'importation sans stress.",
        "escrow_title": "Paiement Sécurisé (Séquestre)",
        "escrow_desc": "Vos fonds sont protégés jusqu'à la validation de la livraison. Payez en toute confiance.",
        "multimodal_title": "Transport Multimodal",
        "multimodal_desc": "Maritime, Aérien, Routier. Nous optimisons le trajet pour réduire les coûts et les délais.",
        "tracking_title": "Suivi en Temps Réel",
        "tracking_desc": "Sachez exactement où se trouve votre marchandise à chaque étape du voyage.",
    },
    "howItWorks": {
        "title": "Comment ça marche ?",
        "subtitle": "Un processus simple en 4 étapes",
        "step1_title": "Demandez une cotation",
        "step1_desc": "Décrivez votre besoin et recevez des offres compétitives.",
        "step2_title": "Choisissez votre offre",
        "step2_desc": "Comparez les prix et les délais, puis sélectionnez la meilleure option.",
        "step3_title": "Paiement Sécurisé",
        "step3_desc": "Versez les fonds sur notre compte séquestre sécurisé.",
        "step4_title": "Suivi & Livraison",
        "step4_desc": "Suivez votre expédition jusqu'à la livraison finale.",
    },
    "testimonials": {
        "title": "Approuvé par les Leaders du Commerce International",
        "review1_name": "",
        "review1_role": "",
        "review1_text": "",
        "review2_name": "",
        "review2_role": "",
        "review2_text": "",
        "review3_name": "",
        "review3_role": "",
        "review3_text": "",
    },
    "cta": {
        "title": "Prêt à optimiser vos importations ?",
        "subtitle": "Rejoignez des milliers d'entreprises qui font confiance à NextMove Cargo.",
        "button": "Commencer maintenant",
    },
    "footer": {
        "tagline": "La solution logistique de nouvelle génération pour l'Afrique.",
        "platform": "Plateforme",
        "company": "Entreprise",
        "rights": "© 2025 NextMove Cargo. Tous droits réservés.",
    },
    "pages": {
        "about": {
            "title": "À Propos de Nous",
            "subtitle": "Révolutionner la logistique entre la Chine et l'Afrique",
            "mission_title": "Notre Mission",
            "mission_desc": "Simplifier le commerce international pour les entrepreneurs africains en offrant une solution logistique transparente, fiable et abordable.",
            "vision_title": "Notre Vision",
            "vision_desc": "Devenir le pont numérique incontournable connectant les marchés mondiaux à l'Afrique.",
            "values_title": "Nos Valeurs",
            "values_desc": "Transparence, Fiabilité, Innovation et Satisfaction Client sont au cœur de tout ce que nous faisons.",
        },
        "contact": {
            "title": "Contactez-nous",
            "subtitle": "Notre équipe est là pour vous aider",
            "email": "djeylanidjitte@gmail.com",
            "phone": "+221 77 000 00 00",
            "address": "Dakar, Sénégal",
            "hours": "Lun - Ven: 9h - 18h",
        },
        "privacy": {
            "title": "Politique de Confidentialité",
            "last_updated": "Dernière mise à jour : 28 Novembre 2025",
            "content": "Chez NextMove Cargo, nous prenons votre vie privée au sérieux. Cette politique décrit comment nous collectons, utilisons et protégeons vos données personnelles...",
        },
    },
    "pwa": {
        "name": "NextMove Cargo",
        "short_name": "NextMove",
        "theme_color": "#1e40af",
        "background_color": "#ffffff",
        "icon_url": "",
        "start_url": "/",
        "display": "standalone",
        "orientation": "portrait",
    },
    "social_media": {
        "facebook": "",
        "twitter": "",
        "instagram": "",
        "linkedin": "",
        "tiktok": "",
        "youtube": "",
        "whatsapp_number": "221771234567",
    },
    "seo": {
        "meta_title_template": "%s | NextMove Cargo",
        "default_title": "NextMove Cargo - Solution Logistique Chine-Afrique",
        "default_description": "NextMove Cargo simplifie vos importations de la Chine vers l'Afrique. Transport maritime, aérien et services de paiement sécurisé.",
        "default_keywords": "import chine afrique, transitaire chine, cargo sénégal, groupage maritime, paiement fournisseur chine",
        "og_image": "https://images.unsplash.com/photo-1586528116311-ad8dd3c8310d?ixlib=rb-1.2.1&auto=format&fit=crop&w=1200&q=80",
    },
    "documents": {
        "invoice_logo": "",
        "company_name": "NextMove Cargo",
        "company_address": "123 Avenue de la Logistique, Dakar, Sénégal",
        "company_tax_id": "SN-DKR-2025-M-12345",
        "invoice_footer_text": "Merci de votre confiance. Facture générée informatiquement.",
        "default_tax_rate": 18,
    },
    "id": "default",
}


# Emergency theme applied when settings cannot be loaded at all.
FALLBACK_BRANDING: Dict[str, Any] = {
    "id": "default",
    "primary_color": "#dc2626",
    "secondary_color": "#1f2937",
    "accent_color": "#ef4444",
    "platform_name": "NextMove Cargo",
    "logo_url": "",
    "pwa": {
        "name": "NextMove Cargo",
        "short_name": "NextMove",
        "theme_color": "#dc2626",
        "background_color": "#ffffff",
        "start_url": "/",
        "display": "standalone",
        "orientation": "portrait",
    },
}


def default_branding() -> Dict[str, Any]:
    """Fresh copy of the default template; safe to mutate."""
    return copy.deepcopy(DEFAULT_BRANDING)


def fallback_branding() -> Dict[str, Any]:
    return copy.deepcopy(FALLBACK_BRANDING)
