"""
Couche services (cas d'utilisation).

Les services orchestrent la logique du domaine :
- MetadataClassifier : pistes brutes -> resolution, codecs, canaux, sous-titres
- RatingMatcher : association floue titre -> note
- CatalogReconciler : Unchanged / Added / Removed par empreinte
- CatalogUpdaterService : run complet de mise a jour du catalogue
- RenamerService : renommage des dossiers d'apres le catalogue

Les services dependent des ports de core/, jamais des adaptateurs concrets.
"""
