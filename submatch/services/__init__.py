"""
Couche services applicatifs (cas d'utilisation).

Les services orchestrent la logique du domaine : scan, remontee des
videos, association des sous-titres, deplacements securises et
nettoyage. Ils dependent des ports (interfaces) de core/, jamais des
implementations concretes de adapters/.
"""
