"""
Legal knowledge corpus: topics, trigger keywords and canned responses.

Topic order is significant. The intent matcher walks topics in the order
they are declared here and stops at the first hit, so broader topics
placed earlier shadow narrower ones placed later (e.g. "civil law" is
claimed by CIVIL before COMPARATIVE is checked).
"""

from typing import List, Tuple

GREETING = (
    "Hello! I'm LegalMind AI, your comprehensive legal assistant. I can help you "
    "with Indian laws, international regulations, legal procedures, and "
    "comparative jurisprudence. Ask me anything!"
)

# (key, triggers, responses)
TopicSpec = Tuple[str, Tuple[str, ...], Tuple[str, ...]]

LEGAL_TOPICS: List[TopicSpec] = [
    # Indian legal system
    (
        "constitution",
        ("indian constitution", "fundamental rights", "directive principles"),
        (
            "The Indian Constitution, adopted on 26th January 1950, is the supreme law of India. "
            "It establishes fundamental rights (Articles 12-35), directive principles "
            "(Articles 36-51), and fundamental duties (Article 51A).",
            "Article 14 guarantees equality before law, Article 19 provides freedom of speech "
            "and expression, Article 21 protects life and personal liberty, and Article 32 is "
            "the right to constitutional remedies.",
            "The Constitution has a federal structure with Union, State, and Concurrent lists. "
            "Parliament can amend the Constitution under Article 368, but basic structure "
            "cannot be altered (Kesavananda Bharati case).",
        ),
    ),
    (
        "criminal",
        ("bns", "bharatiya nyaya", "ipc", "criminal law"),
        (
            "The Bharatiya Nyaya Sanhita (BNS) 2023 has replaced the Indian Penal Code. It "
            "covers offenses against the state, public tranquility, human body, property, "
            "marriage, defamation, and criminal intimidation.",
            "Bharatiya Nagarik Suraksha Sanhita (BNSS) 2023 replaced CrPC, governing criminal "
            "procedure including arrest, investigation, trial, and appeal processes.",
            "Bharatiya Sakshya Adhiniyam (BSA) 2023 replaced the Evidence Act, dealing with "
            "admissibility, relevancy, and burden of proof in criminal proceedings.",
        ),
    ),
    (
        "civil",
        ("cpc", "civil procedure", "contract act", "civil law"),
        (
            "The Civil Procedure Code (CPC) 1908 governs civil litigation procedures in India. "
            "It covers jurisdiction, pleadings, discovery, trial procedures, judgments, and "
            "appeals.",
            "Contract Act 1872 defines agreements, consideration, capacity, free consent, void "
            "agreements, performance, and breach of contracts.",
            "Transfer of Property Act 1882 regulates sale, mortgage, lease, exchange, and gift "
            "of immovable property.",
        ),
    ),
    (
        "corporate",
        ("companies act", "corporate law", "sebi", "ibc"),
        (
            "Companies Act 2013 governs incorporation, management, and winding up of "
            "companies. It introduced concepts like CSR, independent directors, and related "
            "party transactions.",
            "SEBI Act 1992 and SEBI regulations govern securities markets, listing "
            "requirements, disclosure norms, and investor protection.",
            "Insolvency and Bankruptcy Code (IBC) 2016 provides a time-bound process for "
            "resolving insolvency of companies and individuals.",
        ),
    ),
    (
        "taxation",
        ("gst", "income tax", "taxation", "tax law"),
        (
            "Goods and Services Tax (GST) implemented in 2017 is a comprehensive indirect tax "
            "on supply of goods and services. It has four slabs: 5%, 12%, 18%, and 28%.",
            "Income Tax Act 1961 governs direct taxation of individuals, companies, and other "
            "entities. It covers computation, assessment, appeals, and penalties.",
            "Central and State GST laws work together with Input Tax Credit (ITC) mechanism "
            "to avoid cascading effect of taxes.",
        ),
    ),
    (
        "intellectual",
        ("patent", "copyright", "trademark", "intellectual property"),
        (
            "Patents Act 1970 protects inventions for 20 years. Patentability requires "
            "novelty, inventive step, and industrial application. Software per se is not "
            "patentable in India.",
            "Copyright Act 1957 protects original literary, dramatic, musical, and artistic "
            "works. Copyright lasts for author's lifetime plus 60 years.",
            "Trade Marks Act 1999 protects distinctive signs used in trade. Registration "
            "provides exclusive rights for 10 years, renewable indefinitely.",
        ),
    ),
    (
        "labor",
        ("labor", "labour", "employment", "industrial relations"),
        (
            "Labour Code on Wages 2019 consolidates four laws including Minimum Wages Act. It "
            "covers wage payment, bonus, and equal remuneration provisions.",
            "Industrial Relations Code 2020 covers trade unions, conditions of employment, "
            "layoff, retrenchment, and closure provisions.",
            "Code on Social Security 2020 provides social security benefits including "
            "provident fund, gratuity, maternity benefits, and employee compensation.",
        ),
    ),
    (
        "cyber",
        ("cyber law", "it act", "gdpr", "data protection"),
        (
            "Information Technology Act 2000 (amended 2008) governs cyber crimes, electronic "
            "governance, and digital signatures in India.",
            "GDPR (EU) and Personal Data Protection Bill (India) regulate data processing, "
            "requiring consent, providing data subject rights, and imposing penalties for "
            "breaches.",
            "Cyber crimes include hacking (Section 66), identity theft (Section 66C), and "
            "cyber terrorism (Section 66F) with penalties up to life imprisonment.",
        ),
    ),
    # International law
    (
        "international",
        ("international law", "treaty", "un charter", "icj"),
        (
            "International law consists of treaties, customary international law, general "
            "principles, and judicial decisions. Vienna Convention on Law of Treaties 1969 "
            "governs treaty interpretation.",
            "UN Charter establishes principles of international law including sovereign "
            "equality, prohibition of use of force, and peaceful settlement of disputes.",
            "International Court of Justice (ICJ) is the principal judicial organ of the UN, "
            "deciding disputes between states and giving advisory opinions.",
        ),
    ),
    (
        "commercial",
        ("arbitration", "uncitral", "commercial law", "incoterms"),
        (
            "UNCITRAL Model Law on International Commercial Arbitration is adopted by many "
            "countries including India through Arbitration Act 2015.",
            "Hague Convention on International Sale of Goods (CISG) governs international sale "
            "contracts between parties from different contracting states.",
            "INCOTERMS 2020 define standard trade terms used in international contracts, "
            "including delivery, risk transfer, and cost allocation.",
        ),
    ),
    (
        "comparative",
        ("comparative", "common law", "civil law", "federal"),
        (
            "Common law systems (UK, India, Canada) emphasize judicial precedent and case law, "
            "while civil law systems (France, Germany) rely primarily on written codes.",
            "Federal systems like India, USA, and Germany divide powers between central and "
            "state governments, while unitary systems like UK concentrate power centrally.",
            "Judicial review varies: strong in USA and India (Marbury v Madison, Kesavananda "
            "Bharati), limited in UK due to parliamentary sovereignty.",
        ),
    ),
    # Specific provisions
    (
        "article_370",
        ("article 370", "kashmir"),
        (
            "Article 370 was abrogated in August 2019. It previously gave special autonomous "
            "status to Jammu and Kashmir. The Supreme Court in 2023 upheld the abrogation, "
            "stating it was a temporary provision that could be modified by Presidential "
            "order.",
        ),
    ),
    (
        "article_35a",
        ("article 35a",),
        (
            "Article 35A was also nullified with Article 370's abrogation. It allowed J&K "
            "legislature to define permanent residents and their special rights and "
            "privileges. This has been replaced by domicile laws under the J&K Reorganisation "
            "Act 2019.",
        ),
    ),
    (
        "personal_law",
        ("triple talaq", "muslim personal law"),
        (
            "The Muslim Personal Law (Shariat) Application Act 1937 governs Muslim personal "
            "matters. Triple Talaq was criminalized by the Muslim Women (Protection of Rights "
            "on Marriage) Act 2019 after the Supreme Court's Shayara Bano judgment declaring "
            "it unconstitutional.",
        ),
    ),
    (
        "uniform_civil_code",
        ("uniform civil code", "ucc"),
        (
            "Uniform Civil Code under Article 44 (Directive Principle) aims to have common "
            "personal laws for all citizens. Currently, Goa has UCC. The debate continues on "
            "implementing UCC nationwide, balancing religious freedom with gender equality "
            "and national integration.",
        ),
    ),
    (
        "sedition",
        ("sedition", "section 124a"),
        (
            "Section 124A IPC (now Section 150 BNS) defines sedition as bringing hatred or "
            "contempt against the government. Supreme Court cases like Kedar Nath Singh set "
            "the standard requiring incitement to violence or public disorder, not mere "
            "criticism.",
        ),
    ),
    (
        "section_377",
        ("section 377", "homosexuality"),
        (
            "Section 377 IPC was partially struck down in Navtej Singh Johar v Union of India "
            "(2018), decriminalizing homosexuality between consenting adults. The section now "
            "applies only to non-consensual acts and those involving minors.",
        ),
    ),
    # International comparisons
    (
        "usa",
        ("usa", "american law", "us constitution"),
        (
            "The US Constitution (1787) is the world's oldest written constitution. It "
            "established separation of powers, checks and balances, and federalism. The Bill "
            "of Rights (first 10 amendments) protects individual liberties. Judicial review "
            "was established in Marbury v Madison (1803).",
        ),
    ),
    (
        "uk",
        ("uk", "british law", "common law"),
        (
            "UK follows an unwritten constitution based on conventions, statutes, and common "
            "law. Parliamentary sovereignty is supreme - Parliament can make or unmake any "
            "law. The Human Rights Act 1998 incorporated ECHR rights into domestic law.",
        ),
    ),
    (
        "eu",
        ("european union", "eu law", "echr"),
        (
            "EU law consists of primary law (treaties) and secondary law (regulations, "
            "directives). EU law has direct effect and supremacy over national law. The "
            "European Court of Human Rights enforces the European Convention on Human Rights "
            "across 46 member states.",
        ),
    ),
    # Procedure
    (
        "procedure",
        ("how to file", "procedure", "court process"),
        (
            "Legal procedure depends on the matter: Civil cases follow CPC 1908, criminal "
            "cases follow BNSS 2023. Generally: 1) File appropriate petition/complaint, 2) Pay "
            "court fees, 3) Serve notice to opposite party, 4) Appear for hearings, 5) Present "
            "evidence and arguments, 6) Await judgment. Consider consulting a lawyer for "
            "specific guidance.",
        ),
    ),
    (
        "bail",
        ("bail", "anticipatory bail"),
        (
            "Bail is granted under BNSS 2023. Regular bail is sought after arrest, "
            "anticipatory bail before arrest under Section 438 CrPC (now Section 482 BNSS). "
            "Factors considered: gravity of offense, flight risk, evidence tampering "
            "possibility, and criminal history. Bail is generally the rule, jail the "
            "exception.",
        ),
    ),
    (
        "limitation",
        ("limitation period", "time limit"),
        (
            "Limitation Act 1963 prescribes time limits for legal proceedings: Civil suits - "
            "generally 3 years, Contract disputes - 3 years, Tort - 3 years, Recovery of "
            "money - 3 years. Court can condone delay in exceptional circumstances.",
        ),
    ),
    # Recent developments
    (
        "new_criminal_laws",
        ("new criminal laws", "2023 criminal laws"),
        (
            "Three new criminal laws implemented from July 1, 2024: Bharatiya Nyaya Sanhita "
            "(BNS) replacing IPC, Bharatiya Nagarik Suraksha Sanhita (BNSS) replacing CrPC, "
            "and Bharatiya Sakshya Adhiniyam (BSA) replacing Evidence Act. Key changes include "
            "community service, zero FIR, and digitization of criminal justice system.",
        ),
    ),
    (
        "privacy",
        ("data protection bill", "privacy law"),
        (
            "Digital Personal Data Protection Act 2023 is India's comprehensive data "
            "protection law. It requires consent for data processing, provides data subject "
            "rights (access, correction, erasure), imposes penalties up to INR 250 crores, "
            "and establishes the Data Protection Board for enforcement.",
        ),
    ),
    # Conversational
    (
        "greeting",
        ("hello", "hi", "hey"),
        (
            "Hello! I'm your comprehensive legal assistant specializing in Indian and "
            "international law. I can help with constitutional law, criminal law, civil "
            "procedures, corporate regulations, taxation, IP law, labor law, cyber law, and "
            "comparative jurisprudence. What legal topic would you like to explore?",
        ),
    ),
    (
        "help",
        ("help", "what can you do"),
        (
            "I can provide detailed information on: Indian Laws (Constitutional, Criminal, "
            "Civil, Corporate, Tax, IP, Labor, Cyber), International Law (Treaties, ICJ, "
            "Commercial, Human Rights), Legal Procedures (Filing, Bail, Appeals, Limitation), "
            "Comparative Law (Common vs Civil law systems), and Recent Legal Developments. "
            "Ask me anything specific!",
        ),
    ),
    (
        "thanks",
        ("thank",),
        (
            "You're most welcome! I'm always here to assist with your legal queries. Whether "
            "it's Indian law, international regulations, or comparative legal analysis, feel "
            "free to ask anytime. Stay legally informed!",
        ),
    ),
]

FALLBACK_RESPONSES: Tuple[str, ...] = (
    "That's a complex legal matter! Indian law is vast and interconnected. Could you be more "
    "specific about which aspect you'd like to know - whether it's constitutional provisions, "
    "statutory requirements, procedural aspects, or judicial interpretations? I can provide "
    "detailed guidance on any area of Indian or international law.",
    "Legal questions often require understanding the specific context and jurisdiction. In "
    "India, we have central laws, state laws, and local regulations. For international "
    "matters, treaties and conventions apply. Could you clarify which legal system or "
    "specific statute you're interested in?",
    "That's an important legal topic! The answer may vary depending on whether you're looking "
    "at it from a constitutional law perspective, statutory compliance, or practical "
    "implementation. I can explain the legal framework, recent amendments, judicial "
    "precedents, and comparative international practices. What specific angle interests you?",
    "Excellent question! Legal principles often evolve through legislation, judicial "
    "decisions, and constitutional amendments. In the Indian legal system, we also need to "
    "consider federal vs state jurisdiction, fundamental rights implications, and directive "
    "principles. Which particular aspect would you like me to elaborate on?",
    "That touches on a significant area of law! Whether it's Indian jurisprudence, "
    "international conventions, or comparative legal analysis, I can provide comprehensive "
    "insights. The legal landscape includes statutory provisions, case law developments, "
    "regulatory guidelines, and practical implications. What specific dimension would you "
    "like to explore?",
)

